"""Turkish word lists and locale-aware uppercasing for the word games."""

from __future__ import annotations

import re

# Letters of the Turkish alphabet (plus Q, W, X seen in loanwords), both cases
TURKISH_LETTERS = "A-Za-zÇçĞğIıİiÖöŞşÜü"
_NON_LETTER = re.compile(f"[^{TURKISH_LETTERS}]")

WORD_GUESS_WORDS: tuple[str, ...] = (
    "ELMA", "ARMUT", "KALEM", "KİTAP", "BİLGİSAYAR",
    "TELEFON", "MASA", "SANDALYE", "ARABA", "OTOBÜS",
    "İSTANBUL", "ANKARA", "İZMİR", "TÜRKİYE", "DENİZ",
)

WORDLE_TARGET_WORDS: tuple[str, ...] = (
    # 4 letters
    "ALMA", "KEDİ", "MASA", "DERE", "KUZU", "GECE",
    # 5 letters
    "ELMAS", "KALEM", "KİTAP", "ARABA", "DENİZ", "BAHAR", "ÇİÇEK", "GÜNEŞ",
    "ŞEKER", "KAPAK", "SABAH", "AKŞAM", "ORMAN", "KÖPEK", "BULUT", "TAVAN",
    "KAŞIK", "BIÇAK", "SİMİT", "HAYAT", "DÜNYA", "ZAMAN", "KUZEY", "GÜNEY",
    "BALIK", "KALIP",
    # 6 letters
    "KELİME", "YILDIZ", "YAPRAK", "TOPRAK", "PEYNİR", "BARDAK", "KAPLAN",
)

# Accepted as guesses but never chosen as the answer
_EXTRA_ALLOWED_WORDS: tuple[str, ...] = (
    "MAMA", "ANNE", "BABA", "KARA", "SARI", "MAVİ",
    "KALMA", "SALMA", "ALMAK", "ATLAS", "ASLAN", "MASAL", "LAMBA", "KARGA",
    "KARAR", "AYRAN", "BAKIR", "DEMİR", "ÇELİK", "TAHTA", "KUMAŞ", "SEHPA",
    "ÇORBA", "PİLAV", "EKMEK", "ÜZGÜN", "KAYAK", "DOLAP", "KAVAK", "ÇANTA",
    "ÖRDEK", "TAVUK", "HOROZ", "SOĞUK",
    "KARPUZ", "KİRPİK",
)

WORDLE_ALLOWED_WORDS: frozenset[str] = frozenset(WORDLE_TARGET_WORDS + _EXTRA_ALLOWED_WORDS)


def upper_tr(text: str) -> str:
    """Uppercase using Turkish rules: i -> İ and ı -> I."""
    return text.replace("i", "İ").replace("ı", "I").upper()


def strip_non_letters(text: str) -> str:
    """Drop every character that is not a Turkish letter."""
    return _NON_LETTER.sub("", text)
