from growth_backend.handlers.categories.category_slugs import CategorySlugs
from growth_backend.services.growth.schema import CategoryRating, GrowthSummary


def _response(categories, summary=None, success=True):
    data = {"categories": categories}
    if summary is not None:
        data["summary"] = summary
    return {"success": success, "data": data, "message": "ok"}


def test_empty_input_yields_all_placeholders(growth_service):
    result = growth_service.synthesize([])

    assert len(result.cards) == 13
    assert [card.categoryID for card in result.cards] == CategorySlugs.all()
    assert all(card.isPlaceholder for card in result.cards)
    assert all(card.rating == 0 and card.level == "No Data" and card.recordCount == 0 for card in result.cards)


def test_empty_state_is_idempotent(growth_service):
    assert growth_service.synthesize([]) == growth_service.synthesize([])
    assert growth_service.synthesize([]).to_dict() == growth_service.synthesize([]).to_dict()


def test_single_category_scenario(growth_service):
    result = growth_service.synthesize([
        {"category_id": 1, "category_name": "Music Intelligence", "average_rating": 4.4, "record_count": 10},
    ])

    real = [card for card in result.cards if not card.isPlaceholder]
    placeholders = [card for card in result.cards if card.isPlaceholder]

    assert len(real) == 1
    assert real[0].categoryID == "music"
    assert real[0].level == "Good"
    assert real[0].recordCount == 10
    assert real[0].color == "#06B6D4"
    assert len(placeholders) == 12
    assert all(card.rating == 0 and card.level == "No Data" for card in placeholders)


def test_excellent_rating_card(growth_service):
    result = growth_service.synthesize([
        {"category_id": 1, "category_name": "Music Intelligence", "average_rating": 4.6, "record_count": 3},
    ])
    assert result.cards[0].level == "Excellent"
    assert result.cards[0].isPlaceholder is False


def test_real_cards_keep_input_order_then_placeholders_in_registry_order(growth_service):
    result = growth_service.synthesize([
        CategoryRating(category_id=9, category_name="Attendance and Punctuality", average_rating=3.0, record_count=4),
        CategoryRating(category_id=2, category_name="Bodily Kinesthetic Intelligence", average_rating=2.0, record_count=1),
    ])

    ids = [card.categoryID for card in result.cards]
    assert ids[:2] == ["attendance", "bodily_kinesthetic"]
    expectedPlaceholders = [slug for slug in CategorySlugs.all() if slug not in ("attendance", "bodily_kinesthetic")]
    assert ids[2:] == expectedPlaceholders


def test_every_category_exactly_once_with_unique_ids(growth_service):
    categories = [
        {"category_id": index, "category_name": name, "average_rating": 3.0, "record_count": 1}
        for index, name in enumerate(["Music Intelligence", "Existential intelligence", "spatial intelligence", "Astrology"])
    ]
    result = growth_service.synthesize(categories)

    categoryIDs = [card.categoryID for card in result.cards]
    cardIDs = [card.id for card in result.cards]
    assert sorted(categoryIDs) == sorted(CategorySlugs.all())
    assert len(set(cardIDs)) == len(cardIDs) == 13


def test_alias_spellings_resolve_to_canonical_title(growth_service):
    result = growth_service.synthesize([
        {"category_id": 6, "category_name": "Contribution to school Community", "average_rating": 3.6, "record_count": 2},
    ])
    assert result.cards[0].categoryID == "school_community"
    assert result.cards[0].title == "Contribution to School Community"


def test_unmatched_names_become_diagnostics(growth_service):
    result = growth_service.synthesize([
        {"category_id": 99, "category_name": "Astrology", "average_rating": 5.0, "record_count": 1},
    ])
    assert result.unmatchedNames == ["Astrology"]
    assert len(result.cards) == 13
    assert all(card.isPlaceholder for card in result.cards)


def test_duplicate_category_records_keep_first(growth_service):
    result = growth_service.synthesize([
        {"category_id": 3, "category_name": "Existential intelligence", "average_rating": 2.0, "record_count": 1},
        {"category_id": 4, "category_name": "Existential Intelligence", "average_rating": 5.0, "record_count": 7},
    ])

    existential = [card for card in result.cards if card.categoryID == "existential"]
    assert len(existential) == 1
    assert existential[0].rating == 2.0
    assert result.duplicateNames == ["Existential Intelligence"]
    assert len(result.cards) == 13


def test_invalid_records_are_skipped(growth_service):
    result = growth_service.synthesize([
        {"category_name": "Music Intelligence", "average_rating": 4.0},
        {"category_id": 2, "category_name": "Spatial Intelligence", "average_rating": "n/a", "record_count": 1},
        {"category_id": 5, "category_name": "Naturalistic Intelligence", "average_rating": 3.9, "record_count": 2},
    ])
    assert result.skippedRecords == 2
    assert [card.categoryID for card in result.cards if not card.isPlaceholder] == ["naturalistic"]


def test_records_missing_rating_fields_are_skipped(growth_service):
    result = growth_service.synthesize([
        {"category_id": 1, "category_name": "Music Intelligence", "record_count": 4},
        {"category_id": 2, "category_name": "Spatial Intelligence", "average_rating": 3.0},
    ])

    assert result.skippedRecords == 2
    assert all(card.isPlaceholder for card in result.cards)
    music = [card for card in result.cards if card.categoryID == "music"]
    assert music[0].level == "No Data"
    assert music[0].rating == 0


def test_out_of_range_ratings_are_clamped(growth_service):
    result = growth_service.synthesize([
        {"category_id": 1, "category_name": "Music Intelligence", "average_rating": 6.2, "record_count": 1},
    ])
    assert result.cards[0].rating == 5.0
    assert result.cards[0].level == "Excellent"


def test_aggregate_with_summary(growth_service):
    overall = growth_service.aggregate({"average_overall": 3.7, "total_records": 42, "filtered_period": "2025"})

    assert overall.rating == 3.7
    assert overall.level == "Good"
    assert overall.totalRecords == 42
    assert overall.filteredPeriodLabel == "2025"


def test_aggregate_accepts_model(growth_service):
    overall = growth_service.aggregate(GrowthSummary(average_overall=2.0, total_records=3, filtered_period="June 2025"))
    assert overall.level == "At-Risk Level"


def test_aggregate_without_summary_is_empty_sentinel(growth_service):
    overall = growth_service.aggregate(None)

    assert overall.rating == 0
    assert overall.level == "No Data"
    assert overall.totalRecords == 0
    assert overall.filteredPeriodLabel == "No data"


def test_aggregate_with_partial_summary_is_empty_sentinel(growth_service):
    for summary in ({}, {"total_records": 5}, {"average_overall": 3.0, "total_records": 5}):
        overall = growth_service.aggregate(summary)
        assert overall == growth_service.empty_overall()
        assert overall.level == "No Data"


def test_dashboard_with_partial_summary_keeps_cards(growth_service):
    dashboard = growth_service.build_dashboard({
        "success": True,
        "data": {
            "categories": [{"category_id": 1, "category_name": "Music Intelligence", "average_rating": 4.7, "record_count": 5}],
            "summary": {"total_records": 5},
        },
    })
    assert dashboard.cards[0].level == "Excellent"
    assert dashboard.overall.level == "No Data"
    assert dashboard.overall.totalRecords == 0


def test_dashboard_from_full_response(growth_service):
    dashboard = growth_service.build_dashboard(_response(
        categories=[{"category_id": 1, "category_name": "Music Intelligence", "average_rating": 4.7, "record_count": 5}],
        summary={"average_overall": 4.7, "total_records": 5, "filtered_period": "All time"},
    ))

    assert len(dashboard.cards) == 13
    assert dashboard.cards[0].level == "Excellent"
    assert dashboard.overall.level == "Excellent"
    assert dashboard.overall.totalRecords == 5


def test_dashboard_does_not_reaverage_cards(growth_service):
    dashboard = growth_service.build_dashboard(_response(
        categories=[{"category_id": 1, "category_name": "Music Intelligence", "average_rating": 1.0, "record_count": 5}],
        summary={"average_overall": 4.0, "total_records": 5, "filtered_period": "All time"},
    ))
    assert dashboard.overall.rating == 4.0


def test_failed_response_yields_empty_state(growth_service):
    dashboard = growth_service.build_dashboard(_response(
        categories=[{"category_id": 1, "category_name": "Music Intelligence", "average_rating": 4.7, "record_count": 5}],
        summary={"average_overall": 4.7, "total_records": 5, "filtered_period": "All time"},
        success=False,
    ))

    assert len(dashboard.cards) == 13
    assert all(card.isPlaceholder for card in dashboard.cards)
    assert dashboard.overall.level == "No Data"


def test_missing_or_malformed_response_yields_empty_state(growth_service):
    for payload in (None, {}, {"success": True}, {"success": "maybe", "data": []}):
        dashboard = growth_service.build_dashboard(payload)
        assert len(dashboard.cards) == 13
        assert dashboard.overall.filteredPeriodLabel == "No data"


def test_cards_with_data_filters_placeholders(growth_service):
    result = growth_service.synthesize([
        {"category_id": 1, "category_name": "Music Intelligence", "average_rating": 3.0, "record_count": 2},
    ])
    withData = growth_service.cards_with_data(result.cards)
    assert [card.categoryID for card in withData] == ["music"]
