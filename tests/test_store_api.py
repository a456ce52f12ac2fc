import pytest

from app.api import deps
from app.core.auth import Session
from app.repositories.contents import ContentRepository
from app.repositories.conversations import ConversationRepository
from app.repositories.goals import GoalRepository
from app.repositories.stats import StatsRepository
from app.repositories.tasks import TaskRepository
from app.schemas.store import TEST_USER_ID


@pytest.fixture
def store(api_app, fake_supabase):
    """Liga todos os repositórios da API ao FakeSupabase"""
    overrides = {
        deps.get_stats_repository: lambda: StatsRepository(fake_supabase),
        deps.get_task_repository: lambda: TaskRepository(fake_supabase),
        deps.get_goal_repository: lambda: GoalRepository(fake_supabase),
        deps.get_content_repository: lambda: ContentRepository(fake_supabase),
        deps.get_conversation_repository: lambda: ConversationRepository(fake_supabase),
    }
    api_app.dependency_overrides.update(overrides)
    yield fake_supabase
    api_app.dependency_overrides.clear()


def test_stats_without_store_are_simulated(api_app, api_client):
    api_app.dependency_overrides[deps.get_stats_repository] = lambda: StatsRepository(None)

    response = api_client.get("/api/v1/stats/")

    assert response.status_code == 200
    assert response.json() == {
        "tasksCompleted": 12,
        "contentsCreated": 8,
        "activeGoals": 3,
        "hoursEconomized": 24,
    }


def test_stats_count_completed_tasks_of_test_user(api_client, store):
    for i in range(3):
        api_client.post("/api/v1/tasks/", json={"title": f"Tarefa {i}"})
    task_ids = [t["id"] for t in api_client.get("/api/v1/tasks/").json()]
    for task_id in task_ids[:2]:
        api_client.patch(f"/api/v1/tasks/{task_id}/status", json={"status": "completed"})

    body = api_client.get("/api/v1/stats/").json()

    assert body["tasksCompleted"] == 2
    assert body["hoursEconomized"] == 4


def test_task_endpoints(api_client, store):
    created = api_client.post(
        "/api/v1/tasks/",
        json={"title": "Gravar vídeo", "pillar": "conteudo", "priority": "high"},
    )
    assert created.status_code == 201
    task = created.json()["data"]
    assert task["user_id"] == TEST_USER_ID
    assert task["pillar"] == "conteudo"

    listed = api_client.get("/api/v1/tasks/", params={"pillar": "conteudo"})
    assert [t["title"] for t in listed.json()] == ["Gravar vídeo"]

    updated = api_client.patch(
        f"/api/v1/tasks/{task['id']}/status", json={"status": "completed"}
    )
    body = updated.json()
    assert body["error"] is None
    assert body["data"]["completed_at"]


def test_task_uses_session_user(api_app, api_client, store):
    api_app.dependency_overrides[deps.get_session] = lambda: Session(
        access_token="jwt", user_id="user-42"
    )

    created = api_client.post("/api/v1/tasks/", json={"title": "Minha tarefa"})

    assert created.json()["data"]["user_id"] == "user-42"


def login_as(api_app, user_id):
    api_app.dependency_overrides[deps.get_session] = lambda: Session(
        access_token=f"jwt-{user_id}", user_id=user_id
    )


def test_users_cannot_touch_each_others_rows(api_app, api_client, store):
    login_as(api_app, "alice")
    task_id = api_client.post("/api/v1/tasks/", json={"title": "Tarefa da Alice"}).json()["data"]["id"]
    goal_id = api_client.post("/api/v1/goals/", json={"title": "Meta da Alice"}).json()["data"]["id"]
    conversation_id = api_client.post("/api/v1/conversations/", json={}).json()["data"]["id"]
    api_client.post(
        f"/api/v1/conversations/{conversation_id}/messages",
        json={"role": "user", "content": "segredo"},
    )

    login_as(api_app, "bob")
    task_update = api_client.patch(
        f"/api/v1/tasks/{task_id}/status", json={"status": "cancelled"}
    ).json()
    goal_update = api_client.patch(
        f"/api/v1/goals/{goal_id}/status", json={"status": "completed"}
    ).json()
    messages = api_client.get(f"/api/v1/conversations/{conversation_id}/messages").json()
    appended = api_client.post(
        f"/api/v1/conversations/{conversation_id}/messages",
        json={"role": "user", "content": "invasão"},
    ).json()

    assert task_update["data"] is None and task_update["error"]
    assert goal_update["data"] is None and goal_update["error"]
    assert messages == []
    assert appended["error"]

    login_as(api_app, "alice")
    task = api_client.get("/api/v1/tasks/").json()[0]
    assert task.get("status") is None
    messages = api_client.get(f"/api/v1/conversations/{conversation_id}/messages").json()
    assert [m["content"] for m in messages] == ["segredo"]


@pytest.mark.parametrize(
    "body",
    [
        {"title": "x", "priority": "urgente"},
        {"title": "x", "pillar": "astrologia"},
        {"title": ""},
    ],
)
def test_invalid_task_is_422(api_client, store, body):
    response = api_client.post("/api/v1/tasks/", json=body)

    assert response.status_code == 422


def test_invalid_status_is_422(api_client, store):
    response = api_client.patch("/api/v1/tasks/abc/status", json={"status": "feito"})

    assert response.status_code == 422


def test_goal_endpoints(api_client, store):
    created = api_client.post(
        "/api/v1/goals/", json={"title": "Correr 5km", "pillar": "vida", "target_date": "2026-12-01"}
    )
    goal = created.json()["data"]
    assert goal["target_date"] == "2026-12-01"

    api_client.patch(f"/api/v1/goals/{goal['id']}/status", json={"status": "cancelled"})

    active = api_client.get("/api/v1/goals/", params={"status": "active"}).json()
    cancelled = api_client.get("/api/v1/goals/", params={"status": "cancelled"}).json()
    assert active == []
    assert [g["id"] for g in cancelled] == [goal["id"]]


def test_content_endpoints(api_client, store):
    api_client.post(
        "/api/v1/contents/",
        json={"content": "Legenda do post", "pillar": "conteudo", "type": "legenda"},
    )

    contents = api_client.get("/api/v1/contents/", params={"type": "legenda"}).json()

    assert [c["content"] for c in contents] == ["Legenda do post"]


def test_conversation_endpoints(api_client, store):
    created = api_client.post("/api/v1/conversations/", json={"pillar": "estudo"})
    conversation_id = created.json()["data"]["id"]

    api_client.post(
        f"/api/v1/conversations/{conversation_id}/messages",
        json={"role": "user", "content": "Como estudar para a prova?"},
    )
    api_client.post(
        f"/api/v1/conversations/{conversation_id}/messages",
        json={"role": "assistant", "content": "Vamos dividir o conteúdo."},
    )

    messages = api_client.get(f"/api/v1/conversations/{conversation_id}/messages").json()
    assert [m["role"] for m in messages] == ["user", "assistant"]


def test_conversation_without_store_gets_temporary_id(api_app, api_client):
    api_app.dependency_overrides[deps.get_conversation_repository] = (
        lambda: ConversationRepository(None)
    )

    response = api_client.post("/api/v1/conversations/", json={})

    assert response.json() == {"data": {"id": "temp-conversation-id"}, "error": None}


def test_health_reports_configuration(api_client):
    body = api_client.get("/api/v1/health/").json()

    assert body["status"] == "healthy"
    assert body["service"] == "lumi"
    assert "store_configured" in body
