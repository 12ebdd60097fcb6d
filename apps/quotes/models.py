# apps/quotes/models.py
from django.db import models


class Quote(models.Model):
    text = models.TextField()
    author = models.CharField(max_length=200, blank=True)
    category = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f'"{self.text[:40]}" - {self.author}'

    def to_dict(self):
        return {
            'id': self.id,
            'text': self.text,
            'author': self.author,
            'category': self.category,
            'createdAt': self.created_at.isoformat(),
        }
