from django.core.management.base import BaseCommand, CommandError
from quran.api import QuranAPIService

class Command(BaseCommand):
    help = 'API\'den Kuran verilerini çeker ve ekrana yazar'
    stealth_options = ('service',)

    def add_arguments(self, parser):
        parser.add_argument(
            '--surah',
            type=int,
            help='Belirli bir surenin ayetlerini çekmek için sure numarası'
        )
        parser.add_argument(
            '--edition',
            help='Meal sürümü (örn. tr.diyanet); verilmezse ayarlardaki sürüm kullanılır'
        )

    def handle(self, *args, **options):
        service = options.get('service')
        if service is not None:
            self.fetch(service, options)
            return

        with QuranAPIService() as service:
            self.fetch(service, options)

    def fetch(self, service, options):
        surah_number = options.get('surah')

        if surah_number is not None:
            if surah_number < 1:
                raise CommandError(f"{surah_number} numaralı sure bulunamadı.")

            self.stdout.write(self.style.NOTICE(f"{surah_number} numaralı surenin ayetleri çekiliyor..."))
            result = service.get_surah(surah_number, edition=options.get('edition'))
            if not result.ok:
                raise CommandError(f"{surah_number} numaralı surenin ayetleri çekilemedi: {result.message}")

            surah = result.value
            self.stdout.write(self.style.SUCCESS(f"{surah} - {surah.english_name_translation}"))
            for verse in surah.verses:
                self.stdout.write(f"({verse.number}) {verse.text}")
        else:
            self.stdout.write(self.style.NOTICE("Sureler çekiliyor..."))
            result = service.get_surahs()
            if not result.ok:
                raise CommandError(f"Sureler çekilemedi: {result.message}")

            for surah in result.value:
                self.stdout.write(
                    f"{surah.number}. {surah.english_name} ({surah.name}) - "
                    f"{surah.english_name_translation}, {surah.revelation_type}"
                )
            self.stdout.write(self.style.SUCCESS(f"{len(result.value)} sure çekildi."))
