"""
Testler için ortak fixture'lar. API'ye gerçek istek atılmaz; oturum taklit edilir.
"""

import json
from unittest import mock

import pytest
import requests

from quran.api import QuranAPIService


def make_response(payload=None, status_code=200, body=None):
    """Verilen içerikle gerçek bir requests.Response oluşturur."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        body = json.dumps(payload, ensure_ascii=False)
    response._content = body.encode('utf-8')
    response.encoding = 'utf-8'
    return response


@pytest.fixture
def fake_session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def service(fake_session):
    return QuranAPIService(base_url="https://quran.test/v1", session=fake_session)


@pytest.fixture
def fatiha_summary():
    return {
        "number": 1,
        "name": "الفاتحة",
        "englishName": "Al-Fatihah",
        "englishNameTranslation": "The Opening",
        "revelationType": "Meccan",
    }


@pytest.fixture
def surah_list_payload(fatiha_summary):
    return {"code": 200, "status": "OK", "data": [fatiha_summary]}


@pytest.fixture
def surah_detail_payload():
    return {
        "code": 200,
        "status": "OK",
        "data": {
            "number": 1,
            "name": "الفاتحة",
            "englishName": "Al-Fatihah",
            "englishNameTranslation": "The Opening",
            "revelationType": "Meccan",
            "ayahs": [
                {"number": 1, "numberInSurah": 1, "text": "a", "juz": 1, "page": 1},
                {"number": 2, "numberInSurah": 2, "text": "b", "juz": 1, "page": 1},
                {"number": 3, "numberInSurah": 3, "text": "c", "juz": 1, "page": 1},
            ],
        },
    }


def detail_payload_for(number):
    """Numarası istenen sureyi döndüren sahte bir API yanıtı üretir."""
    return {
        "code": 200,
        "status": "OK",
        "data": {
            "number": number,
            "name": f"سورة {number}",
            "englishName": f"Surah-{number}",
            "englishNameTranslation": f"Translation {number}",
            "ayahs": [{"number": 1, "text": "..."}],
        },
    }
