import pytest
from apps.goals.domain.entities import GoalEntity
from apps.goals.models import Goal
from apps.reports.models import UserActivity
from apps.transcriptions.domain.analysis import correct_text, goal_matches_text, match_goals
from apps.transcriptions.models import Transcription


@pytest.mark.parametrize('raw, expected', [
    ("  hello   world .  i think i can", "Hello world. I think I can"),
    ("this is it. it works !", "This is it. It works!"),
    ("i'm here , ok?yes", "I'm here, ok?yes"),
    ("", ""),
])
def test_correct_text(raw, expected):
    assert correct_text(raw) == expected


def test_goal_title_substring_matches():
    assert goal_matches_text('Learn Spanish', 'Today I want to learn spanish words')


def test_all_significant_words_must_occur():
    assert goal_matches_text('Run a marathon', 'Marathon training: I run daily')
    assert not goal_matches_text('Read more books', 'I read books at night')


def test_short_titles_need_substring_match():
    assert not goal_matches_text('Go', 'I will not')


def test_match_goals_keeps_order():
    goals = [GoalEntity(id=7, title='Sleep better'), GoalEntity(id=3, title='Health'),
             GoalEntity(id=9, title='Career')]
    assert match_goals('health first, then better sleep', goals) == [7, 3]


@pytest.mark.django_db
class TestTranscriptionsApi:

    def test_analyze_requires_text(self, auth_client):
        response = auth_client.get('/api/analyze')
        assert response.status_code == 400
        assert response.json()['message'] == 'Text is required'

    def test_analyze_matches_active_goals(self, auth_client, goal_tree):
        Goal.objects.filter(pk=goal_tree['career'].pk).update(active=False)

        response = auth_client.get('/api/analyze', {'text': 'i slept better. health and career matter'})

        assert response.status_code == 200
        body = response.json()
        assert body['text'] == 'i slept better. health and career matter'
        assert body['correctedText'] == 'I slept better. Health and career matter'
        assert body['goalMatches'] == [goal_tree['health'].id]

    def test_create_stores_analysis(self, auth_client, user, goal_tree):
        response = auth_client.post('/api/transcriptions', {
            'content': 'i want to run a marathon',
            'goalId': goal_tree['run'].id,
            'duration': 42,
        }, content_type='application/json')

        assert response.status_code == 201
        body = response.json()
        assert body['correctedContent'] == 'I want to run a marathon'
        assert body['goalMatches'] == [goal_tree['run'].id]
        assert body['goalId'] == goal_tree['run'].id

        activity = UserActivity.objects.get(user=user, activity_type='transcription')
        assert activity.details == {'transcriptionId': body['id'], 'duration': 42}

    def test_create_requires_content(self, auth_client):
        response = auth_client.post('/api/transcriptions', {'content': '  '}, content_type='application/json')
        assert response.status_code == 400

    def test_create_with_foreign_goal(self, auth_client, other_user):
        foreign = Goal.objects.create(user=other_user, title='Not mine')
        response = auth_client.post('/api/transcriptions', {'content': 'x', 'goalId': foreign.id},
                                    content_type='application/json')
        assert response.status_code == 404

    def test_list_newest_first(self, auth_client, user, other_user):
        first = Transcription.objects.create(user=user, content='first')
        second = Transcription.objects.create(user=user, content='second')
        Transcription.objects.create(user=other_user, content='not mine')

        ids = [t['id'] for t in auth_client.get('/api/transcriptions').json()]
        assert ids == [second.id, first.id]

    def test_delete(self, auth_client, user, other_user):
        mine = Transcription.objects.create(user=user, content='mine')
        theirs = Transcription.objects.create(user=other_user, content='theirs')

        assert auth_client.delete(f'/api/transcriptions/{mine.id}').json() == {'success': True}
        assert auth_client.delete(f'/api/transcriptions/{theirs.id}').status_code == 404
        assert Transcription.objects.filter(pk=theirs.pk).exists()
