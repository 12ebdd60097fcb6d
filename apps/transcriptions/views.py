from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from apps.core.http import api_login_required, json_error, read_json
from .models import Transcription
from .services import TranscriptionService


@require_http_methods(["GET", "POST"])
@api_login_required
def transcriptions_api_view(request):
    if request.method == 'GET':
        entries = Transcription.objects.filter(user=request.user)
        return JsonResponse([t.to_dict() for t in entries], safe=False)

    data = read_json(request)
    if data is None:
        return json_error("Invalid JSON body")

    content = data.get('content')
    if not isinstance(content, str):
        return json_error("Transcription content is required")

    media = data.get('media')
    if media is not None and not isinstance(media, dict):
        return json_error("media must be an object")

    try:
        goal_id = data.get('goalId')
        goal_id = int(goal_id) if goal_id not in (None, '') else None
        duration = int(data.get('duration') or 0)
    except (TypeError, ValueError):
        return json_error("goalId and duration must be integers")

    try:
        transcription = TranscriptionService().create(
            request.user, content, goal_id=goal_id, duration=duration, media=media
        )
    except LookupError as e:
        return json_error(str(e), status=404)
    except ValueError as e:
        return json_error(str(e))

    return JsonResponse(transcription.to_dict(), status=201)


@require_http_methods(["DELETE"])
@api_login_required
def transcription_detail_api_view(request, pk):
    deleted, _ = Transcription.objects.filter(pk=pk, user=request.user).delete()
    if not deleted:
        return json_error("Transcription not found", status=404)
    return JsonResponse({'success': True})


@require_http_methods(["GET"])
@api_login_required
def analyze_api_view(request):
    text = request.GET.get('text')
    if not text:
        return json_error("Text is required")

    result = TranscriptionService().analyze_for_user(request.user, text)
    return JsonResponse(result.to_dict())
