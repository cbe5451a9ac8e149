from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from thaispell.common.config import settings
from thaispell.spellcheck.engine import NorvigSpellChecker, get_default_checker

app = FastAPI(title="Thai Spell API")

# Stored words are at most max_len long; anything longer than that plus two edits cannot match.
MAX_WORD_LENGTH = settings.max_len + 2


class SpellResponse(BaseModel):
    word: str
    candidates: list[str]


class CorrectionResponse(BaseModel):
    word: str
    correction: str
    changed: bool


class DictionaryStats(BaseModel):
    words: int
    total: int


class SpellService:
    def __init__(self, *, checker: NorvigSpellChecker | None = None) -> None:
        self._checker = checker

    @property
    def checker(self) -> NorvigSpellChecker:
        if self._checker is None:
            self._checker = get_default_checker()
        return self._checker

    def _clean(self, word: str) -> str:
        word = word.strip()
        if not word:
            raise HTTPException(status_code=422, detail="word must not be blank")
        return word

    def spell(self, word: str) -> SpellResponse:
        word = self._clean(word)
        return SpellResponse(word=word, candidates=self.checker.spell(word))

    def correct(self, word: str) -> CorrectionResponse:
        word = self._clean(word)
        correction = self.checker.correct(word)
        return CorrectionResponse(word=word, correction=correction, changed=correction != word)

    def stats(self) -> DictionaryStats:
        return DictionaryStats(words=len(self.checker.table), total=self.checker.total)


spell_service = SpellService()


@app.get("/spell", response_model=SpellResponse)
def spell(
    word: str = Query(..., min_length=1, max_length=MAX_WORD_LENGTH),
) -> SpellResponse:
    return spell_service.spell(word)


@app.get("/correct", response_model=CorrectionResponse)
def correct(
    word: str = Query(..., min_length=1, max_length=MAX_WORD_LENGTH),
) -> CorrectionResponse:
    return spell_service.correct(word)


@app.get("/dictionary/stats", response_model=DictionaryStats)
def dictionary_stats() -> DictionaryStats:
    return spell_service.stats()
