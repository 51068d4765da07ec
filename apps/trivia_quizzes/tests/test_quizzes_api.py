import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.trivia_quizzes.catalog import QuizCatalog
from apps.trivia_quizzes.game import QuizItem
from apps.trivia_quizzes.models import Quiz


@pytest.mark.django_db
def test_seed_command_loads_fixture():
    call_command("seed_quizzes")
    assert Quiz.objects.count() == 4
    assert Quiz.objects.get(question="Capital of France").answer == "Paris"


@pytest.mark.django_db
def test_create_show_update_delete(client):
    resp = client.post(
        "/api/quizzes/",
        data={"question": "Capital of Spain?", "answer": "Madrid"},
        content_type="application/json",
    )
    assert resp.status_code == 201
    quiz_id = resp.json()["id"]

    resp = client.get(f"/api/quizzes/{quiz_id}/")
    assert resp.status_code == 200
    assert resp.json()["answer"] == "Madrid"

    resp = client.put(
        f"/api/quizzes/{quiz_id}/",
        data={"question": "Capital of Portugal?", "answer": "Lisbon"},
        content_type="application/json",
    )
    assert resp.status_code == 200
    assert Quiz.objects.get(id=quiz_id).answer == "Lisbon"

    resp = client.delete(f"/api/quizzes/{quiz_id}/")
    assert resp.status_code == 204
    assert not Quiz.objects.filter(id=quiz_id).exists()


@pytest.mark.django_db
def test_create_rejects_blank_fields(client):
    resp = client.post(
        "/api/quizzes/",
        data={"question": "", "answer": "x"},
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert "question" in resp.json()
    assert Quiz.objects.count() == 0


@pytest.mark.django_db
def test_unknown_quiz_is_404(client):
    assert client.get("/api/quizzes/999/").status_code == 404


def test_search_words_in_order(client, quizzes):
    resp = client.get("/api/quizzes/", {"search": "capital  france"})
    assert resp.status_code == 200
    assert [q["question"] for q in resp.json()["results"]] == ["Capital of France?"]

    resp = client.get("/api/quizzes/", {"search": "france capital"})
    assert resp.json()["count"] == 0

    resp = client.get("/api/quizzes/", {"search": "of"})
    assert resp.json()["count"] == 2


@pytest.mark.django_db
def test_pagination_ten_per_page(client):
    for i in range(12):
        Quiz.objects.create(question=f"Question {i}", answer=str(i))

    first = client.get("/api/quizzes/").json()
    assert first["count"] == 12
    assert len(first["results"]) == 10

    second = client.get("/api/quizzes/", {"pageno": 2}).json()
    assert [q["question"] for q in second["results"]] == ["Question 10", "Question 11"]


def test_play_hides_answer(client, quizzes):
    resp = client.get(f"/api/quizzes/{quizzes[1].id}/play/", {"answer": "Lyon"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["answer"] == "Lyon"
    assert body["quiz"] == {"id": quizzes[1].id, "question": "Capital of France?"}


def test_check_normalizes_answer(client, quizzes):
    url = f"/api/quizzes/{quizzes[1].id}/check/"
    assert client.get(url, {"answer": "  pARIS "}).json()["result"] is True
    assert client.get(url, {"answer": "Lyon"}).json()["result"] is False
    assert client.get(url).json() == {
        "quiz": {"id": quizzes[1].id, "question": "Capital of France?"},
        "answer": "",
        "result": False,
    }


def test_catalog_reads(quizzes):
    catalog = QuizCatalog()
    assert catalog.count() == 3
    assert [item.question for item in catalog.list()] == [
        "Capital of Italy?",
        "Capital of France?",
        "2+2?",
    ]
    assert catalog.get_by_id(quizzes[2].id) == QuizItem(quizzes[2].id, "2+2?", "4")
    assert catalog.get_by_id(999) is None


@pytest.mark.django_db
@pytest.mark.parametrize("pageno", ["0", "-3", "abc", ""])
def test_bad_pageno_falls_back_to_first_page(client, pageno):
    for i in range(12):
        Quiz.objects.create(question=f"Question {i}", answer=str(i))

    resp = client.get("/api/quizzes/", {"pageno": pageno})
    assert resp.status_code == 200
    assert resp.json()["results"][0]["question"] == "Question 0"


@pytest.mark.django_db
def test_seed_command_is_idempotent():
    call_command("seed_quizzes")
    call_command("seed_quizzes")
    assert Quiz.objects.count() == 4


@pytest.mark.django_db
def test_seed_command_missing_fixture(tmp_path):
    with pytest.raises(CommandError):
        call_command("seed_quizzes", fixture=str(tmp_path / "nope.json"))
