import logging
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from apps.core.http import api_login_required, json_error, read_json
from apps.goals.models import Goal
from .domain.services import ReportService, activity_to_dict, parse_iso_date, tracking_to_dict
from .services import ActivityLogger

logger = logging.getLogger(__name__)


def _date_range(request):
    """Zakres ?startDate=&endDate= (oba albo żaden). Rzuca ValueError."""
    start = parse_iso_date(request.GET.get('startDate'))
    end = parse_iso_date(request.GET.get('endDate'))
    if bool(start) != bool(end):
        raise ValueError("Both startDate and endDate are required for a date range")
    if start and end and start > end:
        raise ValueError("startDate must not be after endDate")
    return start, end


@require_http_methods(["GET", "POST"])
@api_login_required
def user_activity_api_view(request):
    """Historia aktywności usera (najnowsze pierwsze) / logowanie zdarzenia."""
    if request.method == 'GET':
        activities = request.user.activities.all()
        return JsonResponse([activity_to_dict(a) for a in activities], safe=False)

    data = read_json(request)
    if data is None:
        return json_error("Invalid JSON body")

    activity_type = data.get('activityType')
    details = data.get('details') or {}
    if not activity_type or not isinstance(activity_type, str):
        return json_error("activityType is required")
    if not isinstance(details, dict):
        return json_error("details must be an object")

    activity = ActivityLogger.log(request.user, activity_type, details)
    return JsonResponse(activity_to_dict(activity), status=201)


@require_http_methods(["GET", "POST"])
@api_login_required
def project_tracking_api_view(request):
    service = ReportService()

    if request.method == 'GET':
        try:
            start, end = _date_range(request)
        except ValueError as e:
            return json_error(str(e))

        tracking = service.get_tracking(request.user, start, end)
        logger.debug("Found %s tracking records for user %s", len(tracking), request.user.id)
        return JsonResponse([tracking_to_dict(t) for t in tracking], safe=False)

    data = read_json(request)
    if data is None:
        return json_error("Invalid JSON body")

    # goalId może przyjść jako string z formularza
    goal_id = data.get('goalId')
    try:
        goal_id = int(goal_id)
    except (TypeError, ValueError):
        goal_id = None
    if not goal_id or goal_id <= 0:
        logger.warning("Invalid goal ID received: %r", data.get('goalId'))
        return json_error(f"Goal ID must be a positive number, received: {data.get('goalId')!r}")

    goal = Goal.objects.filter(id=goal_id, user=request.user).first()
    if goal is None:
        return json_error("Goal not found", status=404)

    try:
        tracking = service.track_time(
            request.user,
            goal,
            total_time=int(data.get('totalTime') or 0),
            sessions_count=int(data.get('sessionsCount', 1)),
            day=parse_iso_date(data.get('dateGrouping')),
        )
    except (TypeError, ValueError) as e:
        return json_error(str(e))

    return JsonResponse(tracking_to_dict(tracking))


@require_http_methods(["GET"])
@api_login_required
def project_tracking_summary_api_view(request):
    try:
        start, end = _date_range(request)
    except ValueError as e:
        return json_error(str(e))

    return JsonResponse(ReportService().get_goal_summary(request.user, start, end), safe=False)
