from common.query import active_filter, build_query, keyword_filter


def test_empty_query_is_just_the_active_predicate():
    assert build_query() == active_filter()
    assert active_filter() == {"$or": [{"deleted_at": {"$exists": False}}, {"deleted_at": None}]}


def test_keyword_ors_across_fields_case_insensitively():
    clause = keyword_filter("an", ["ho_ten", "ma_so_sinh_vien"])
    assert clause == {
        "$or": [
            {"ho_ten": {"$regex": "an", "$options": "i"}},
            {"ma_so_sinh_vien": {"$regex": "an", "$options": "i"}},
        ]
    }


def test_keyword_is_escaped():
    clause = keyword_filter("C++(basic)", ["ten.vi"])
    assert clause["$or"][0]["ten.vi"]["$regex"] == r"C\+\+\(basic\)"


def test_blank_keyword_adds_nothing():
    assert keyword_filter("   ", ["ho_ten"]) is None
    assert build_query("", ["ho_ten"]) == active_filter()


def test_filters_are_anded_and_empty_values_skipped():
    query = build_query(
        "an",
        ["ho_ten"],
        filters={"khoa": "f1", "nam_hoc": None, "hoc_ky": ""},
        regex_filters={"giang_vien": " Tran ", "phong_hoc": None},
    )
    assert query == {
        "$and": [
            active_filter(),
            {"$or": [{"ho_ten": {"$regex": "an", "$options": "i"}}]},
            {"khoa": "f1"},
            {"giang_vien": {"$regex": "Tran", "$options": "i"}},
        ]
    }


def test_zero_is_a_real_filter_value():
    query = build_query(filters={"hoc_ky": 0})
    assert {"hoc_ky": 0} in query["$and"]
