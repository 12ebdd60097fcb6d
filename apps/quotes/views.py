from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from apps.core.http import json_error, read_json
from .domain.services import daily_quote
from .models import Quote


@require_http_methods(["GET", "POST"])
def quotes_api_view(request):
    if request.method == 'GET':
        return JsonResponse([q.to_dict() for q in Quote.objects.all()], safe=False)

    # Odczyt publiczny, dodawanie tylko dla zalogowanych
    if not request.user.is_authenticated:
        return json_error("Not authenticated", status=401)

    data = read_json(request)
    if data is None:
        return json_error("Invalid JSON body")

    text = data.get('text')
    if not isinstance(text, str) or not text.strip():
        return json_error("Quote text is required")

    quote = Quote.objects.create(
        text=text.strip(),
        author=str(data.get('author') or '')[:200],
        category=str(data.get('category') or '')[:100],
    )
    return JsonResponse(quote.to_dict(), status=201)


@require_http_methods(["GET"])
def daily_quote_api_view(request):
    quote = daily_quote()
    if quote is None:
        return json_error("No quotes available", status=404)
    return JsonResponse(quote.to_dict())


@require_http_methods(["GET"])
def quote_detail_api_view(request, pk):
    quote = Quote.objects.filter(pk=pk).first()
    if quote is None:
        return json_error("Quote not found", status=404)
    return JsonResponse(quote.to_dict())
