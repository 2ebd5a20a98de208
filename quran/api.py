import enum
import logging
from typing import Any

import requests
from django.conf import settings
from pydantic import BaseModel, ConfigDict

from .exceptions import MalformedResponse, SurahNotFound, UpstreamUnavailable
from .mappers import parse_surah_detail, parse_surah_list

logger = logging.getLogger(__name__)


class FetchStatus(enum.Enum):
    OK = 'ok'
    NOT_FOUND = 'not_found'
    TRANSPORT_ERROR = 'transport_error'
    PARSE_ERROR = 'parse_error'


class FetchResult(BaseModel):
    """
    Bir API çağrısının sonucu. Başarılıysa value dolu, değilse status hatanın türünü söyler.
    """
    model_config = ConfigDict(frozen=True)

    status: FetchStatus
    value: Any = None
    message: str = ''

    @classmethod
    def success(cls, value):
        return cls(status=FetchStatus.OK, value=value)

    @classmethod
    def failure(cls, status, message):
        return cls(status=status, message=message)

    @property
    def ok(self):
        return self.status is FetchStatus.OK


class QuranAPIService:
    """
    Kuran verilerini harici API'den çekmek için servis sınıfı.

    Adres, zaman aşımı ve meal sürümü ayarlardan okunur; istenirse
    doğrudan verilebilir. Tekrar deneme yapılmaz.
    """
    BASE_URL = "https://api.alquran.cloud/v1"

    def __init__(self, base_url=None, timeout=None, edition=None, session=None):
        base_url = base_url or getattr(settings, 'QURAN_API_BASE_URL', None) or self.BASE_URL
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout if timeout is not None else getattr(settings, 'QURAN_API_TIMEOUT', None)
        self.edition = edition or getattr(settings, 'QURAN_API_EDITION', None)
        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """
        Servisin kendi açtığı oturumu kapatır; dışarıdan verilen oturuma dokunmaz.
        """
        if self._owns_session:
            self.session.close()

    def _get(self, path, parser):
        url = f"{self.base_url}/{path}"
        logger.info(f"API isteği: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.exception(f"API'ye ulaşılamadı: {url}")
            return FetchResult.failure(FetchStatus.TRANSPORT_ERROR, str(e))

        if response.status_code == 404:
            logger.warning(f"API kaydı bulamadı: {url}")
            return FetchResult.failure(FetchStatus.NOT_FOUND, f"Durum kodu: {response.status_code}")

        if not 200 <= response.status_code < 300:
            logger.error(f"API'den veri çekilemedi. Durum kodu: {response.status_code}")
            return FetchResult.failure(FetchStatus.TRANSPORT_ERROR, f"Durum kodu: {response.status_code}")

        try:
            value = parser(response.text)
        except SurahNotFound as e:
            logger.warning(f"API kaydı bulamadı: {url} ({e})")
            return FetchResult.failure(FetchStatus.NOT_FOUND, str(e))
        except UpstreamUnavailable as e:
            logger.error(f"API hata döndürdü: {url} ({e})")
            return FetchResult.failure(FetchStatus.TRANSPORT_ERROR, str(e))
        except MalformedResponse as e:
            logger.error(f"API yanıtı çözümlenemedi: {url} ({e})")
            return FetchResult.failure(FetchStatus.PARSE_ERROR, str(e))

        return FetchResult.success(value)

    def get_surahs(self):
        """
        Tüm sureleri çeker.
        """
        return self._get("surah", parse_surah_list)

    def get_surah(self, surah_number, edition=None):
        """
        Belirli bir sureyi ayetleriyle birlikte çeker.
        """
        edition = edition or self.edition
        path = f"surah/{surah_number}"
        if edition:
            path = f"{path}/{edition}"
        return self._get(path, parse_surah_detail)

    def fetch_surah_list(self):
        """
        Sure listesini döndürür; herhangi bir hatada boş liste döner.
        """
        result = self.get_surahs()
        return result.value if result.ok else []

    def fetch_surah_detail(self, surah_number, edition=None):
        """
        Sureyi döndürür; bulunamazsa ya da hata olursa None döner.
        """
        result = self.get_surah(surah_number, edition=edition)
        return result.value if result.ok else None
