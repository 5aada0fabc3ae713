from news_engine.models import Article, SeoMetadata
from news_engine.pipeline import run_pipeline
from news_engine.records import build_news_record, new_document_id
from news_engine.validator import validate_request


def test_new_document_id_is_short_hex_and_unique():
    first, second = new_document_id(), new_document_id()
    assert len(first) == 20
    assert int(first, 16) >= 0
    assert first != second


def test_record_carries_defaults_and_aliases():
    request = validate_request(
        {"topic": "fuel price", "trendType": "trending", "trendScore": 3.4, "trendSource": ["twitter"]}
    )
    article = Article(title="T", summary="S", body="B")
    seo = SeoMetadata(title="T", description="B", slug="t", keywords=("fuel", "price"))

    record = build_news_record(
        request, article, seo, model="gpt-test", news_id="abc", published_at="2026-01-01T00:00:00+00:00"
    )
    doc = record.to_document()

    assert doc["newsId"] == "abc"
    assert doc["content"] == "B"
    assert doc["tags"] == ["fuel", "price"]
    assert doc["seoKeywords"] == "fuel,price"
    assert doc["thumbnailUr"] == ""
    assert doc["ogImageUrl"] is None
    assert doc["aiPrompt"] == 'News article for topic "fuel price" in "en" generated by gpt-test.'
    assert doc["aiGenerated"] is True
    assert doc["trendSource"] == ["twitter"]
    assert doc["trendScore"] == 3.4
    assert doc["views"] == 0 and doc["commentsCount"] == 0
    assert doc["isFlagged"] is False and doc["flagReason"] is None
    assert doc["status"] == "published"
    assert doc["sourceType"] == "ai_trending"


def test_run_pipeline_stores_one_record(settings, model_client, model_calls, fake_store):
    request = validate_request({"topic": "fuel price", "language": "EN"})

    result = run_pipeline(
        request, settings, client=model_client, store=fake_store, published_at="2026-01-01T00:00:00+00:00"
    )

    assert len(model_calls) == 1
    assert len(fake_store.calls) == 1
    call = fake_store.calls[0]
    assert call["database_id"] == "xapzap_db"
    assert call["collection_id"] == "news"
    assert call["document_id"] == result.news_id == result.document_id

    data = call["data"]
    assert data["title"] == "Fuel Prices Climb in Lagos"
    assert data["seoSlug"] == "fuel-prices-climb-in-lagos"
    assert data["seoKeywords"].split(",")[0] == "fuel"
    assert "\n" not in data["seoDescription"]
    assert data["thumbnailUr"] == "https://cdn.example/thumb.png"
    assert data["ogImageUrl"] == "https://cdn.example/thumb.png"
    assert data["aiModel"] == "gpt-test"
    assert data["publishedAt"] == "2026-01-01T00:00:00+00:00"
