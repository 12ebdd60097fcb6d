from django import template
register = template.Library()


@register.filter
def get_item(dictionary, key):
    """Słownik z kluczami int (np. sub_goals_by_parent) - pusta lista dla braku klucza."""
    if not dictionary:
        return []
    return dictionary.get(key, [])

