# apps/transcriptions/domain/analysis.py
import re
from dataclasses import dataclass, field
from typing import Iterable, List

_WHITESPACE = re.compile(r'\s+')
_SPACE_BEFORE_PUNCT = re.compile(r'\s+([.,!?;:])')
_LONE_I = re.compile(r"\bi\b(?=$|[\s.,!?;:'])")
_SENTENCE_START = re.compile(r'(^|[.!?]\s+)([a-z])')
_WORD = re.compile(r"[^\W\d_]+", re.UNICODE)

SIGNIFICANT_WORD_LENGTH = 4


@dataclass
class TextAnalysis:
    text: str
    corrected_text: str
    goal_matches: List[int] = field(default_factory=list)

    def to_dict(self):
        return {
            'text': self.text,
            'correctedText': self.corrected_text,
            'goalMatches': self.goal_matches,
        }


def correct_text(text: str) -> str:
    """
    Proste poprawki dyktowanego tekstu:
    - zbite białe znaki,
    - brak spacji przed interpunkcją,
    - samodzielne "i" -> "I",
    - wielka litera na początku zdania.
    """
    if not text:
        return ''

    result = _WHITESPACE.sub(' ', text).strip()
    result = _SPACE_BEFORE_PUNCT.sub(r'\1', result)
    result = _LONE_I.sub('I', result)
    result = _SENTENCE_START.sub(lambda m: m.group(1) + m.group(2).upper(), result)
    return result


def _words(text: str) -> set:
    return {w.lower() for w in _WORD.findall(text or '')}


def goal_matches_text(title: str, text: str) -> bool:
    title = (title or '').strip()
    if not title or not text:
        return False

    if title.lower() in text.lower():
        return True

    significant = {w for w in _words(title) if len(w) >= SIGNIFICANT_WORD_LENGTH}
    return bool(significant) and significant <= _words(text)


def match_goals(text: str, goals: Iterable) -> List[int]:
    """Id celów, których tytuł pasuje do tekstu (kolejność wejściowa)."""
    return [goal.id for goal in goals if goal_matches_text(goal.title, text)]


def analyze(text: str, goals: Iterable = ()) -> TextAnalysis:
    corrected = correct_text(text)
    return TextAnalysis(text=text, corrected_text=corrected, goal_matches=match_goals(corrected, goals))
