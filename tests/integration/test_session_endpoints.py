"""End-to-end tests for the HTML and CSV routes."""

import csv
import datetime
import io

from sqlmodel import Session, select

from traininglog.db.repositories import WorkoutRepository
from traininglog.models.workout import Workout
from traininglog.models.workout_item import WorkoutItem


def _session_form(workout_id: int = 0, day: int = 1, **fields) -> dict[str, str]:
    form = {
        "workout_id": str(workout_id),
        "day": str(day),
        "session_date": "2024-03-15",
        "body_weight_kg": "82.5",
        "it_0_kind": "check", "it_0_label": "foam roll", "c_0": "on",
        "it_2_kind": "heading", "it_2_label": "3-4 circuits",
        "it_3_kind": "sets", "it_3_label": "inc 2 pushups", "it_3_sets": "4",
        "s_3_1": "15", "s_3_2": "12", "s_3_3": "10", "s_3_4": "8",
    }
    form.update(fields)
    return form


def _created_id(response) -> int:
    marker = 'name="workout_id" value="'
    start = response.text.index(marker) + len(marker)
    return int(response.text[start:response.text.index('"', start)])


def _item_count(session, workout_id: int) -> int:
    return len(session.exec(select(WorkoutItem).where(WorkoutItem.workout_id == workout_id)).all())


def _label_rows(session, workout_id: int, label: str) -> list[WorkoutItem]:
    statement = (select(WorkoutItem).where(WorkoutItem.workout_id == workout_id, WorkoutItem.label == label)
                 .order_by(WorkoutItem.set_index))
    return list(session.exec(statement).all())


# ======================================================================
# Pages
# ======================================================================


class TestPages:

    def test_home_shows_status_and_next_day(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "ok" in response.text
        assert "day 1" in response.text

    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["db"] == "ok"

    def test_new_session_form_lists_plan_items(self, client):
        response = client.get("/session/new")
        assert response.status_code == 200
        assert 'name="it_3_label" value="inc 2 pushups"' in response.text
        assert 'name="s_3_4"' in response.text

    def test_static_files(self, client):
        assert client.get("/static/app.css").status_code == 200


# ======================================================================
# Saving
# ======================================================================


class TestSaveDraft:

    def test_first_save_creates_workout(self, client, db_engine):
        response = client.post("/session/save", data=_session_form())
        assert response.status_code == 200
        assert response.headers["HX-Trigger"] == "saved"
        assert response.text.endswith("Saved")

        workout_id = _created_id(response)
        with Session(db_engine) as session:
            workout = WorkoutRepository(session).get_by_id(workout_id)
            assert workout.day_num == 1
            assert workout.session_date == datetime.date(2024, 3, 15)
            assert workout.completed_at is None
            assert _item_count(session, workout_id) == 5

    def test_resave_replaces_sets(self, client, db_engine):
        workout_id = _created_id(client.post("/session/save", data=_session_form()))
        fewer = _session_form(workout_id=workout_id, it_3_sets="4", s_3_1="9", s_3_2="7", s_3_3="", s_3_4="")

        response = client.post("/session/save", data=fewer)
        assert response.status_code == 200
        assert response.text == "Saved"

        with Session(db_engine) as session:
            rows = _label_rows(session, workout_id, "inc 2 pushups")
            assert [(r.set_index, r.value_int) for r in rows] == [(1, 9), (2, 7)]

    def test_absent_metadata_is_kept(self, client, db_engine):
        workout_id = _created_id(client.post("/session/save", data=_session_form()))
        client.post("/session/save", data=_session_form(workout_id=workout_id, session_date="", body_weight_kg=""))

        with Session(db_engine) as session:
            workout = session.get(Workout, workout_id)
            assert workout.session_date == datetime.date(2024, 3, 15)
            assert f"{workout.body_weight_kg:.2f}" == "82.50"

    def test_bad_set_value_is_client_error(self, client):
        response = client.post("/session/save", data=_session_form(s_3_1="lots"))
        assert response.status_code == 400

    def test_non_numeric_workout_id_is_client_error(self, client):
        assert client.post("/session/save", data=_session_form(workout_id="abc")).status_code == 400

    def test_unknown_workout_is_not_found(self, client):
        assert client.post("/session/save", data=_session_form(workout_id=9999)).status_code == 404


# ======================================================================
# Completing
# ======================================================================


class TestComplete:

    def test_complete_new_session(self, client, db_engine):
        response = client.post("/session/complete", data=_session_form(), headers={"HX-Request": "true"})
        assert response.status_code == 200
        assert response.headers["HX-Redirect"] == "/"

        with Session(db_engine) as session:
            (workout,) = session.exec(select(Workout)).all()
            assert workout.completed_at is not None
            assert WorkoutRepository(session).next_day() == 2

    def test_plain_client_is_redirected_home(self, client):
        response = client.post("/session/complete", data=_session_form(), follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/"

    def test_complete_saved_draft(self, client, db_engine):
        workout_id = _created_id(client.post("/session/save", data=_session_form(day=5)))
        client.post("/session/complete", data=_session_form(workout_id=workout_id, day=5))

        with Session(db_engine) as session:
            assert session.get(Workout, workout_id).completed_at is not None
            assert WorkoutRepository(session).next_day() == 6

    def test_repeated_completion_keeps_rotation(self, client, db_engine):
        first = _created_id(client.post("/session/save", data=_session_form(day=1)))
        client.post("/session/complete", data=_session_form(workout_id=first, day=1))
        client.post("/session/complete", data=_session_form(day=2))

        with Session(db_engine) as session:
            stamp = session.get(Workout, first).completed_at
            assert WorkoutRepository(session).next_day() == 3

        response = client.post("/session/complete", data=_session_form(workout_id=first, day=1),
                               follow_redirects=False)
        assert response.status_code == 303

        with Session(db_engine) as session:
            assert session.get(Workout, first).completed_at == stamp
            assert WorkoutRepository(session).next_day() == 3

    def test_missing_workout_changes_nothing(self, client, db_engine):
        response = client.post("/session/complete", data=_session_form(workout_id=9999))
        assert response.status_code == 404

        with Session(db_engine) as session:
            assert _item_count(session, 9999) == 0
            assert WorkoutRepository(session).last_completed_day() is None

    def test_failed_completion_rolls_back_everything(self, client, db_engine, monkeypatch):
        workout_id = _created_id(client.post("/session/save", data=_session_form()))
        monkeypatch.setattr(WorkoutRepository, "mark_completed", lambda self, workout_id, completed_at=None: 0)

        response = client.post("/session/complete",
                               data=_session_form(workout_id=workout_id, body_weight_kg="90", s_3_1="1"))
        assert response.status_code == 500

        with Session(db_engine) as session:
            workout = session.get(Workout, workout_id)
            assert workout.completed_at is None
            assert f"{workout.body_weight_kg:.2f}" == "82.50"
            rows = _label_rows(session, workout_id, "inc 2 pushups")
            assert [r.value_int for r in rows] == [15, 12, 10, 8]


# ======================================================================
# History
# ======================================================================


class TestHistory:

    def test_list_and_detail(self, client):
        client.post("/session/complete", data=_session_form())

        listing = client.get("/sessions")
        assert listing.status_code == 200
        assert "2024-03-15" in listing.text

        detail = client.get("/sessions/1")
        assert detail.status_code == 200
        assert "82.50" in detail.text
        assert "inc 2 pushups: 15, 12, 10, 8" in detail.text
        assert "foam roll" in detail.text

    def test_detail_not_found(self, client):
        assert client.get("/sessions/0").status_code == 404
        assert client.get("/sessions/-4").status_code == 404
        assert client.get("/sessions/12345").status_code == 404
        assert client.get("/sessions/abc").status_code == 404

    def test_calendar_full_page_and_fragment(self, client):
        client.post("/session/complete", data=_session_form())

        page = client.get("/calendar", params={"ym": "2024-03"})
        assert page.status_code == 200
        assert "<html" in page.text
        assert "March 2024" in page.text
        assert 'data-date="2024-03-15"' in page.text

        fragment = client.get("/calendar", params={"ym": "2024-03"}, headers={"HX-Request": "true"})
        assert fragment.status_code == 200
        assert "<html" not in fragment.text
        assert 'class="day done" data-date="2024-03-15"' in fragment.text


# ======================================================================
# Export
# ======================================================================


class TestExport:

    def test_export_rows(self, client):
        form = {
            "workout_id": "0", "day": "1", "session_date": "2024-03-15",
            "it_0_kind": "sets", "it_0_label": "green rows", "it_0_sets": "2", "s_0_1": "10", "s_0_2": "8",
            "it_1_kind": "check", "it_1_label": "stretch", "c_1": "on",
        }
        client.post("/session/complete", data=form)

        response = client.get("/export.csv")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert 'filename="traininglog_export.csv"' in response.headers["content-disposition"]

        rows = list(csv.DictReader(io.StringIO(response.text)))
        assert len(rows) == 3
        assert {row["workout_id"] for row in rows} == {"1"}
        assert [(r["kind"], r["label"], r["set_index"], r["value_int"], r["checked"]) for r in rows] == [
            ("sets", "green rows", "1", "10", ""),
            ("sets", "green rows", "2", "8", ""),
            ("check", "stretch", "", "", "true"),
        ]
        assert rows[0]["session_date"] == "2024-03-15"
        assert rows[0]["body_weight_kg"] == ""
        assert rows[0]["completed_at"]

    def test_export_empty_database(self, client):
        response = client.get("/export.csv")
        assert response.text.splitlines() == [
            "workout_id,day_num,session_date,body_weight_kg,completed_at,kind,label,set_index,value_int,checked"]
