# apps/quotes/domain/services.py
from datetime import date
from typing import Optional
from apps.quotes.models import Quote

DEFAULT_QUOTES = [
    ("The only way to do great work is to love what you do.", "Steve Jobs"),
    ("Innovation distinguishes between a leader and a follower.", "Steve Jobs"),
    ("Life is what happens when you're busy making other plans.", "John Lennon"),
    ("The future belongs to those who believe in the beauty of their dreams.", "Eleanor Roosevelt"),
    ("Success is not final, failure is not fatal: it is the courage to continue that counts.", "Winston Churchill"),
]


def daily_index(day: date, count: int) -> int:
    """Ten sam indeks przez cały dzień: RRRRMMDD modulo liczba cytatów."""
    return (day.year * 10000 + day.month * 100 + day.day) % count


def daily_quote(day: Optional[date] = None) -> Optional[Quote]:
    quotes = list(Quote.objects.order_by('id'))
    if not quotes:
        return None
    day = day or date.today()
    return quotes[daily_index(day, len(quotes))]


def seed_default_quotes() -> int:
    """Dodaje brakujące cytaty startowe. Zwraca liczbę nowych."""
    created = 0
    for text, author in DEFAULT_QUOTES:
        _, was_created = Quote.objects.get_or_create(text=text, defaults={'author': author, 'category': 'motivation'})
        created += int(was_created)
    return created
