from django.http import Http404, JsonResponse
from django.shortcuts import render
import logging

from .api import FetchStatus, QuranAPIService

logger = logging.getLogger(__name__)

_default_service = None


def get_default_service():
    """
    Görünümlerin paylaştığı servisi döndürür.
    Oturum ve bağlantı havuzu istekler arasında yeniden kullanılır.
    """
    global _default_service
    if _default_service is None:
        _default_service = QuranAPIService()
    return _default_service


def surah_list(request, service=None):
    """
    Tüm sureleri listeleyen görünüm.
    API'ye ulaşılamazsa boş tablo gösterilir.
    """
    service = service or get_default_service()
    surahs = service.fetch_surah_list()
    return render(request, 'quran/surah_list.html', {'surahs': surahs})


def surah_detail(request, surah_number, service=None):
    """
    Belirli bir surenin ayetlerini gösteren görünüm.
    """
    if surah_number < 1:
        raise Http404("Sure bulunamadı.")

    service = service or get_default_service()
    surah = service.fetch_surah_detail(surah_number)
    if surah is None:
        logger.info(f"Sure gösterilemedi: {surah_number}")
        raise Http404("Sure bulunamadı.")

    return render(request, 'quran/surah_detail.html', {
        'surah': surah,
        'verses': surah.verses,
    })

# API Görünümleri

def api_surah_list(request, service=None):
    """
    Tüm sureleri JSON formatında döndüren API görünümü.
    """
    service = service or get_default_service()
    result = service.get_surahs()
    if not result.ok:
        return JsonResponse({'error': result.message, 'status': result.status.value}, status=502)

    return JsonResponse({'surahs': [surah.model_dump() for surah in result.value]})


def api_surah_detail(request, surah_number, service=None):
    """
    Belirli bir surenin ayetlerini JSON formatında döndüren API görünümü.
    Bulunamayan sure 404, API hataları 502 döner.
    """
    if surah_number < 1:
        return JsonResponse({'error': 'Sure bulunamadı.', 'status': FetchStatus.NOT_FOUND.value}, status=404)

    service = service or get_default_service()
    result = service.get_surah(surah_number)
    if not result.ok:
        status = 404 if result.status is FetchStatus.NOT_FOUND else 502
        return JsonResponse({'error': result.message, 'status': result.status.value}, status=status)

    surah = result.value
    return JsonResponse({
        'surah': surah.model_dump(exclude={'verses'}),
        'verses': [verse.model_dump() for verse in surah.verses],
    })
