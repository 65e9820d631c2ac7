FULL_TABLE = [
    {"grade_label": "A", "min_score": 80},
    {"grade_label": "B+", "min_score": 75},
    {"grade_label": "B", "min_score": 70},
    {"grade_label": "C+", "min_score": 65},
    {"grade_label": "C", "min_score": 60},
    {"grade_label": "D+", "min_score": 55},
    {"grade_label": "D", "min_score": 50},
    {"grade_label": "F", "min_score": 0},
]


def test_replace_and_list_grade_ranges(client, scope_params):
    # Submitted out of order; listed best first
    res = client.put(
        "/api/v1/grade-ranges",
        json={**scope_params, "ranges": list(reversed(FULL_TABLE))},
    )
    assert res.status_code == 200
    assert res.json() == [{**r, "min_score": float(r["min_score"])} for r in FULL_TABLE]

    listed = client.get("/api/v1/grade-ranges", params=scope_params)
    assert listed.status_code == 200
    assert [r["grade_label"] for r in listed.json()] == [r["grade_label"] for r in FULL_TABLE]


def test_replace_grade_ranges_overwrites_previous(client, scope_params):
    client.put("/api/v1/grade-ranges", json={**scope_params, "ranges": FULL_TABLE})
    raised = [{**r, "min_score": min(r["min_score"] + 5, 100)} for r in FULL_TABLE]

    res = client.put("/api/v1/grade-ranges", json={**scope_params, "ranges": raised})
    assert res.status_code == 200

    listed = client.get("/api/v1/grade-ranges", params=scope_params).json()
    assert len(listed) == 8
    assert listed[0] == {"grade_label": "A", "min_score": 85.0}


def test_seven_entry_table_is_rejected_and_storage_unchanged(client, scope_params):
    client.put("/api/v1/grade-ranges", json={**scope_params, "ranges": FULL_TABLE})

    res = client.put("/api/v1/grade-ranges", json={**scope_params, "ranges": FULL_TABLE[:7]})
    assert res.status_code == 422
    assert "exactly 8" in res.json()["detail"]

    listed = client.get("/api/v1/grade-ranges", params=scope_params).json()
    assert [r["grade_label"] for r in listed] == [r["grade_label"] for r in FULL_TABLE]


def test_table_with_wrong_labels_is_rejected(client, scope_params):
    ranges = FULL_TABLE[:7] + [{"grade_label": "E", "min_score": 0}]
    res = client.put("/api/v1/grade-ranges", json={**scope_params, "ranges": ranges})
    assert res.status_code == 422

    assert client.get("/api/v1/grade-ranges", params=scope_params).json() == []


def test_min_score_out_of_range_is_rejected(client, scope_params):
    ranges = [{**FULL_TABLE[0], "min_score": 101}] + FULL_TABLE[1:]
    res = client.put("/api/v1/grade-ranges", json={**scope_params, "ranges": ranges})
    assert res.status_code == 422


def test_list_grade_ranges_needs_full_scope(client, scope_params):
    client.put("/api/v1/grade-ranges", json={**scope_params, "ranges": FULL_TABLE})
    partial = {k: v for k, v in scope_params.items() if k != "grade_id"}

    assert client.get("/api/v1/grade-ranges", params=partial).json() == []


def test_grading_policy_defaults_and_updates(client, scope_params):
    res = client.get("/api/v1/grading-policy", params=scope_params)
    assert res.status_code == 200
    assert res.json() == {**scope_params, "policy": "fixed"}

    res = client.put("/api/v1/grading-policy", json={**scope_params, "policy": "range_table"})
    assert res.status_code == 200
    assert res.json()["policy"] == "range_table"

    res = client.put("/api/v1/grading-policy", json={**scope_params, "policy": "fixed"})
    assert res.json()["policy"] == "fixed"
    assert client.get("/api/v1/grading-policy", params=scope_params).json()["policy"] == "fixed"


def test_grading_policy_rejects_unknown(client, scope_params):
    res = client.put("/api/v1/grading-policy", json={**scope_params, "policy": "curve"})
    assert res.status_code == 422


def test_replace_grade_ranges_unknown_scope(client, scope_params):
    res = client.put(
        "/api/v1/grade-ranges",
        json={**scope_params, "semester_id": 9999, "ranges": FULL_TABLE},
    )
    assert res.status_code == 404
    assert res.json()["detail"] == "Semester not found"


def test_grading_policy_unknown_scope(client, scope_params):
    res = client.put(
        "/api/v1/grading-policy",
        json={**scope_params, "subject_id": 9999, "policy": "range_table"},
    )
    assert res.status_code == 404
