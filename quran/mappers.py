import json

from pydantic import ValidationError

from .exceptions import MalformedResponse, SurahNotFound, UpstreamUnavailable
from .models import SurahDetail, SurahSummary


def lower_keys(value):
    """
    Sözlük anahtarlarını iç içe yapılar dahil küçük harfe çevirir.
    Böylece "Number" ile "number" aynı alana bağlanır.
    """
    if isinstance(value, dict):
        return {str(key).lower(): lower_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [lower_keys(item) for item in value]
    return value


def unwrap(body):
    """
    {code, status, data} zarfını açar ve data kısmını döndürür.
    """
    try:
        payload = json.loads(body)
    except (TypeError, ValueError, RecursionError) as e:
        raise MalformedResponse(f"Yanıt JSON olarak okunamadı: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedResponse("Yanıt bir JSON nesnesi değil.")

    try:
        payload = lower_keys(payload)
    except RecursionError as e:
        raise MalformedResponse("Yanıt çok derin iç içe.") from e

    code = payload.get('code')
    if code is not None and code != 200:
        if code == 404:
            raise SurahNotFound(f"API kodu: {code}")
        raise UpstreamUnavailable(f"API kodu: {code}")

    return payload.get('data')


def parse_surah_list(body):
    """
    Sure listesi yanıtını SurahSummary listesine çevirir.
    Sıra ve adet API'nin döndürdüğü gibi korunur.
    """
    data = unwrap(body)
    if data is None:
        return []
    if not isinstance(data, list):
        raise MalformedResponse("Sure listesi bir dizi değil.")

    try:
        return [SurahSummary.model_validate(item) for item in data]
    except ValidationError as e:
        raise MalformedResponse(f"Sure listesi çözümlenemedi: {e.error_count()} hata") from e


def parse_surah_detail(body):
    """
    Tek sure yanıtını ayetleriyle birlikte SurahDetail'e çevirir.
    """
    data = unwrap(body)
    if data is None:
        raise SurahNotFound("Yanıtta sure verisi yok.")
    if not isinstance(data, dict):
        raise MalformedResponse("Sure verisi bir nesne değil.")

    try:
        return SurahDetail.model_validate(data)
    except ValidationError as e:
        raise MalformedResponse(f"Sure çözümlenemedi: {e.error_count()} hata") from e
