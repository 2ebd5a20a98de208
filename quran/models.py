from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class QuranRecord(BaseModel):
    """
    API yanıtından bir kez oluşturulan, sonrasında değiştirilemeyen kayıtların tabanı.
    Alan adları küçük harfe çevrilmiş API anahtarlarıyla eşleşir.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')


class SurahSummary(QuranRecord):
    """
    Sure listesindeki tek bir sure.
    """
    number: int = Field(ge=1, description='Sure numarası')
    name: str = Field(description='Surenin Arapça adı')
    english_name: str = Field(alias='englishname')
    english_name_translation: str = Field(alias='englishnametranslation')
    revelation_type: str = Field(alias='revelationtype', description='Meccan / Medinan')
    number_of_ayahs: Optional[int] = Field(default=None, alias='numberofayahs')

    def __str__(self):
        return f"{self.number}. {self.english_name}"


class Verse(QuranRecord):
    """
    Bir suredeki ayet. Numara sure içindeki sırayı gösterir.
    """
    number: int = Field(ge=1, validation_alias=AliasChoices('numberinsurah', 'number'))
    text: str
    juz: Optional[int] = None
    page: Optional[int] = None


class SurahDetail(QuranRecord):
    """
    Ayetleriyle birlikte tek bir sure.
    """
    number: int = Field(ge=1)
    name: str
    english_name: str = Field(alias='englishname')
    english_name_translation: str = Field(alias='englishnametranslation')
    revelation_type: Optional[str] = Field(default=None, alias='revelationtype')
    verses: tuple[Verse, ...] = Field(default=(), alias='ayahs')

    def __str__(self):
        return f"{self.number}. {self.english_name}"

    @property
    def verse_count(self):
        return len(self.verses)
