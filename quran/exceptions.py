class QuranAPIError(Exception):
    """
    Kuran API'si ile konuşurken oluşan hataların tabanı.
    """


class UpstreamUnavailable(QuranAPIError):
    """
    API'ye ulaşılamadı ya da başarısız bir durum kodu döndü.
    """


class MalformedResponse(QuranAPIError):
    """
    API yanıtı beklenen JSON yapısında değil.
    """


class SurahNotFound(QuranAPIError):
    """
    İstenen sure API'de bulunamadı.
    """
