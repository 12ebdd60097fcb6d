import logging
from django.http import JsonResponse
from django.shortcuts import render, redirect, get_object_or_404
from django.contrib.auth.decorators import login_required
from django.views.decorators.http import require_http_methods
from apps.core.http import api_login_required, error_messages, json_error, read_json
from .adapters.orm_repositories import DjangoGoalRepository
from .application.use_cases import (
    CreateGoalUseCase, DeleteGoalUseCase, GoalInput, GoalNotFound, UpdateGoalUseCase,
)
from .domain.services import filter_sub_goals, main_goals
from .filters import GoalFilter
from .forms import GoalForm
from .models import Goal

logger = logging.getLogger(__name__)


@login_required
def goal_list_view(request):
    """Lista celów głównych z podcelami."""
    goals = list(Goal.objects.filter(user=request.user))
    roots = main_goals(goals)
    sub_goals_by_parent = {goal.id: filter_sub_goals(goals, goal) for goal in roots}

    return render(request, 'goals/goal_list.html', {
        'goals': roots,
        'sub_goals_by_parent': sub_goals_by_parent,
    })


@login_required
def goal_detail_view(request, pk):
    """Strona celu z panelem bocznym podcelów."""
    goal = get_object_or_404(Goal, pk=pk, user=request.user)
    main_goal = goal if goal.is_main_goal else goal.parent

    sub_goals = filter_sub_goals(Goal.objects.filter(user=request.user), main_goal)
    selected_sub_goal = goal if not goal.is_main_goal else None

    return render(request, 'goals/goal_detail.html', {
        'goal': goal,
        'main_goal': main_goal,
        'sub_goals': sub_goals,
        'selected_sub_goal': selected_sub_goal,
    })


@login_required
def goal_create_view(request):
    if request.method == 'POST':
        form = GoalForm(request.user, request.POST)
        if form.is_valid():
            goal = form.save(commit=False)
            goal.user = request.user
            goal.save()
            return redirect('goal_list')
    else:
        form = GoalForm(request.user, initial={'parent': request.GET.get('parent')})

    return render(request, 'goals/goal_form.html', {'form': form, 'title': 'New goal'})


@login_required
def goal_edit_view(request, pk):
    goal = get_object_or_404(Goal, pk=pk, user=request.user)
    if request.method == 'POST':
        form = GoalForm(request.user, request.POST, instance=goal)
        if form.is_valid():
            form.save()
            return redirect('goal_list')
    else:
        form = GoalForm(request.user, instance=goal)

    return render(request, 'goals/goal_form.html', {'form': form, 'title': f'Edit: {goal.title}'})


# ---------------------------------------------------------------
# API (JSON)
# ---------------------------------------------------------------

def _optional_int(value, name):
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer")


def _clean_goal_payload(data):
    """Walidacja typów pól przychodzących z klienta."""
    cleaned = {}
    if 'title' in data:
        if not isinstance(data['title'], str):
            raise ValueError("title must be a string")
        cleaned['title'] = data['title']
    if 'description' in data:
        if data['description'] is not None and not isinstance(data['description'], str):
            raise ValueError("description must be a string")
        cleaned['description'] = data['description']
    if 'parentId' in data:
        cleaned['parentId'] = _optional_int(data['parentId'], 'parentId')
    if 'order' in data:
        cleaned['order'] = _optional_int(data['order'], 'order') or 0
    if 'active' in data:
        if not isinstance(data['active'], bool):
            raise ValueError("active must be a boolean")
        cleaned['active'] = data['active']
    if 'content' in data:
        if data['content'] is not None and not isinstance(data['content'], dict):
            raise ValueError("content must be an object")
        cleaned['content'] = data['content'] or {}
    return cleaned


@require_http_methods(["GET", "POST"])
@api_login_required
def goals_api_view(request):
    repo = DjangoGoalRepository()

    if request.method == 'GET':
        goal_filter = GoalFilter(request.GET, queryset=Goal.objects.filter(user=request.user))
        if not goal_filter.is_valid():
            return json_error("Invalid filter", errors=error_messages(goal_filter.errors))

        goals = [repo.to_entity(g).to_dict() for g in goal_filter.qs]
        logger.debug("Fetched %s goals for user ID %s", len(goals), request.user.id)
        return JsonResponse(goals, safe=False)

    data = read_json(request)
    if data is None:
        return json_error("Invalid JSON body")

    try:
        payload = _clean_goal_payload(data)
        goal = CreateGoalUseCase(repo).execute(GoalInput(
            title=payload.get('title', ''),
            user_id=request.user.id,
            description=payload.get('description') or "",
            parent_id=payload.get('parentId'),
            order=payload.get('order', 0),
            content=payload.get('content') or {},
        ))
    except ValueError as e:
        return json_error(str(e))

    return JsonResponse(goal.to_dict(), status=201)


@require_http_methods(["GET", "PUT", "PATCH", "DELETE"])
@api_login_required
def goal_detail_api_view(request, pk):
    repo = DjangoGoalRepository()

    if request.method == 'GET':
        goal = repo.get_for_user(pk, request.user.id)
        if goal is None:
            return json_error("Goal not found", status=404)
        return JsonResponse(goal.to_dict())

    if request.method == 'DELETE':
        try:
            deleted_ids = DeleteGoalUseCase(repo).execute(pk, request.user.id)
        except GoalNotFound:
            return json_error("Goal not found", status=404)
        logger.info("Deleted goal %s with %s sub goal(s)", pk, len(deleted_ids) - 1)
        return JsonResponse({'success': True})

    data = read_json(request)
    if data is None:
        return json_error("Invalid JSON body")

    try:
        changes = _clean_goal_payload(data)
        goal = UpdateGoalUseCase(repo).execute(
            pk, request.user.id, changes, partial=request.method == 'PATCH'
        )
    except GoalNotFound:
        return json_error("Goal not found", status=404)
    except ValueError as e:
        return json_error(str(e))

    return JsonResponse(goal.to_dict())
