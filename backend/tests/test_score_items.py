from gradebook.models.score import Score


def _create_item(client, scope_params, type_id, name="Quiz 1", max_score=10):
    res = client.post(
        "/api/v1/score-items",
        json={"name": name, "max_score": max_score, "type_id": type_id, **scope_params},
    )
    assert res.status_code == 201
    return res.json()


def test_score_items_crud(client, catalog, scope_params):
    exam = _create_item(client, scope_params, catalog["exam_type_id"], name="Final", max_score=50)
    quiz = _create_item(client, scope_params, catalog["homework_type_id"], name="Quiz 1")

    list_res = client.get("/api/v1/score-items", params=scope_params)
    assert list_res.status_code == 200
    items = list_res.json()
    # Ordered by score type, then id
    assert [i["id"] for i in items] == [quiz["id"], exam["id"]]
    assert items[0]["type_name"] == "Homework"
    assert items[1]["max_score"] == 50

    put_res = client.put(
        f"/api/v1/score-items/{quiz['id']}",
        json={"name": "Quiz 1 (retake)", "max_score": 20, "type_id": catalog["exam_type_id"]},
    )
    assert put_res.status_code == 200
    updated = put_res.json()
    assert updated["name"] == "Quiz 1 (retake)"
    assert updated["max_score"] == 20
    assert updated["type_name"] == "Exam"

    del_res = client.delete(f"/api/v1/score-items/{quiz['id']}")
    assert del_res.status_code == 204

    remaining = client.get("/api/v1/score-items", params=scope_params).json()
    assert [i["id"] for i in remaining] == [exam["id"]]


def test_list_score_items_needs_full_scope(client, catalog, scope_params):
    _create_item(client, scope_params, catalog["homework_type_id"])

    partial = {k: v for k, v in scope_params.items() if k != "semester_id"}
    res = client.get("/api/v1/score-items", params=partial)
    assert res.status_code == 200
    assert res.json() == []


def test_list_score_items_filters_by_scope(client, catalog, scope_params):
    _create_item(client, scope_params, catalog["homework_type_id"])
    other_scope = {**scope_params, "academic_year_id": catalog["other_year_id"]}

    res = client.get("/api/v1/score-items", params=other_scope)
    assert res.json() == []


def test_create_score_item_validation(client, catalog, scope_params):
    res = client.post(
        "/api/v1/score-items",
        json={
            "name": "Quiz",
            "max_score": -1,
            "type_id": catalog["homework_type_id"],
            **scope_params,
        },
    )
    assert res.status_code == 422

    res = client.post(
        "/api/v1/score-items",
        json={"max_score": 10, "type_id": catalog["homework_type_id"], **scope_params},
    )
    assert res.status_code == 422

    res = client.post(
        "/api/v1/score-items",
        json={"name": "Quiz", "max_score": 10, "type_id": 9999, **scope_params},
    )
    assert res.status_code == 404


def test_update_and_delete_unknown_item(client, catalog):
    res = client.put(
        "/api/v1/score-items/9999",
        json={"name": "X", "max_score": 1, "type_id": catalog["homework_type_id"]},
    )
    assert res.status_code == 404

    assert client.delete("/api/v1/score-items/9999").status_code == 404


def test_delete_score_item_removes_its_scores(client, db_session, catalog, scope_params):
    item = _create_item(client, scope_params, catalog["homework_type_id"])
    student = client.post(
        "/api/v1/students",
        json={
            "code": "001",
            "name": "Ana",
            "grade_id": catalog["grade_id"],
            "room_id": catalog["room_id"],
            "academic_year_id": catalog["year_id"],
        },
    ).json()
    client.put(
        "/api/v1/scores",
        json={"student_id": student["id"], "score_item_id": item["id"], "score": 8},
    )

    assert client.delete(f"/api/v1/score-items/{item['id']}").status_code == 204

    assert db_session.query(Score).filter(Score.score_item_id == item["id"]).count() == 0
    roster = client.get(
        "/api/v1/students", params={**scope_params, "room_id": catalog["room_id"]}
    ).json()
    assert roster[0]["scores"] == {}


def test_create_score_item_above_column_limit(client, catalog, scope_params):
    res = client.post(
        "/api/v1/score-items",
        json={
            "name": "Project",
            "max_score": 10000,
            "type_id": catalog["homework_type_id"],
            **scope_params,
        },
    )
    assert res.status_code == 422
    assert client.get("/api/v1/score-items", params=scope_params).json() == []


def test_create_score_item_unknown_scope_rows(client, catalog, scope_params):
    for field in ("grade_id", "subject_id", "academic_year_id", "semester_id"):
        res = client.post(
            "/api/v1/score-items",
            json={
                "name": "Quiz",
                "max_score": 10,
                "type_id": catalog["homework_type_id"],
                **{**scope_params, field: 9999},
            },
        )
        assert res.status_code == 404, field

    assert client.get("/api/v1/score-items", params=scope_params).json() == []
