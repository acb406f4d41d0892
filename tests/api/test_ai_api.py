import pytest

from moodlog.apps.api.main import create_app
from moodlog.apps.api.services.mood_insights import MoodInsightService
from moodlog.libs.errors import RemoteCallFailure


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"note": ""}, {"note": "   "}, {"note": 7}, None])
async def test_analyze_mood_requires_note(settings, make_router, fake_provider, api_client, payload):
    provider = fake_provider()
    app = create_app(settings, llm_router=make_router(provider))
    async with api_client(app) as client:
        resp = await client.post("/api/ai/analyze-mood", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Note text is required"}
    assert provider.calls == []


@pytest.mark.asyncio
async def test_analyze_mood_success(settings, make_router, fake_provider, api_client):
    provider = fake_provider(['{"suggestedMood": "Excited", "confidence": 0.8, "emoji": "🤩"}'])
    app = create_app(settings, llm_router=make_router(provider))
    async with api_client(app) as client:
        resp = await client.post("/api/ai/analyze-mood", json={"note": "Got the job!"})
    assert resp.status_code == 200
    assert resp.json() == {"suggestedMood": "Excited", "confidence": 0.8, "emoji": "🤩"}


@pytest.mark.asyncio
async def test_analyze_mood_remote_failure_returns_fallback(settings, make_router, fake_provider, api_client):
    provider = fake_provider(error=RemoteCallFailure("connection reset"))
    app = create_app(settings, llm_router=make_router(provider))
    async with api_client(app) as client:
        resp = await client.post("/api/ai/analyze-mood", json={"note": "long day"})
    assert resp.status_code == 200
    assert resp.json() == {"suggestedMood": "Calm", "confidence": 0.5, "emoji": "😌"}


@pytest.mark.asyncio
async def test_analyze_mood_without_any_provider_returns_fallback(settings, make_router, api_client):
    app = create_app(settings, llm_router=make_router())
    async with api_client(app) as client:
        resp = await client.post("/api/ai/analyze-mood", json={"note": "long day"})
    assert resp.status_code == 200
    assert resp.json()["suggestedMood"] == "Calm"


@pytest.mark.asyncio
async def test_insights_with_empty_journal(settings, make_router, fake_provider, api_client):
    provider = fake_provider(["unused"])
    app = create_app(settings, llm_router=make_router(provider))
    async with api_client(app) as client:
        resp = await client.get("/api/ai/insights")
    assert resp.status_code == 200
    assert resp.json() == {"insights": "Start tracking your moods to get personalized insights!"}
    assert provider.calls == []


@pytest.mark.asyncio
async def test_insights_summarise_stored_entries(settings, make_router, fake_provider, api_client):
    provider = fake_provider(["You have been steady and kind to yourself."])
    app = create_app(settings, llm_router=make_router(provider))
    async with api_client(app) as client:
        await client.post("/api/mood-entries", json={"mood": "Peaceful", "emoji": "☮️", "note": "yoga"})
        resp = await client.get("/api/ai/insights")
    assert resp.status_code == 200
    assert resp.json() == {"insights": "You have been steady and kind to yourself."}
    assert "yoga" in provider.last_prompt


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"mood": ""}, {"mood": 1}, {"note": "tired"}])
async def test_recommendations_require_mood(settings, make_router, api_client, payload):
    app = create_app(settings, llm_router=make_router())
    async with api_client(app) as client:
        resp = await client.post("/api/ai/recommendations", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Mood is required"}


@pytest.mark.asyncio
async def test_recommendations_reject_non_string_note(settings, make_router, api_client):
    app = create_app(settings, llm_router=make_router())
    async with api_client(app) as client:
        resp = await client.post("/api/ai/recommendations", json={"mood": "Sad", "note": 12})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_recommendations_success_and_fallback(settings, make_router, fake_provider, api_client):
    provider = fake_provider(['["Call a friend", "Take a warm shower", "Write three good things"]', "garbage"])
    app = create_app(settings, llm_router=make_router(provider))
    async with api_client(app) as client:
        ok = await client.post("/api/ai/recommendations", json={"mood": "Sad", "note": None})
        degraded = await client.post("/api/ai/recommendations", json={"mood": "Sad"})
    assert ok.json() == {"recommendations": ["Call a friend", "Take a warm shower", "Write three good things"]}
    assert degraded.status_code == 200
    assert degraded.json() == {
        "recommendations": ["Take a moment to breathe", "Practice gratitude", "Connect with someone you care about"]
    }


@pytest.mark.asyncio
async def test_unexpected_adapter_failure_is_500(settings, make_router, api_client):
    class ExplodingService(MoodInsightService):
        async def classify_mood(self, note):
            raise KeyError("bug")

        async def summarize(self, entries):
            raise KeyError("bug")

        async def recommend(self, mood, note=None):
            raise KeyError("bug")

    app = create_app(settings, insight_service=ExplodingService(make_router()))
    async with api_client(app) as client:
        analyze = await client.post("/api/ai/analyze-mood", json={"note": "x"})
        insights = await client.get("/api/ai/insights")
        recs = await client.post("/api/ai/recommendations", json={"mood": "Sad"})
    assert (analyze.status_code, analyze.json()) == (500, {"message": "Failed to analyze mood"})
    assert (insights.status_code, insights.json()) == (500, {"message": "Failed to generate insights"})
    assert (recs.status_code, recs.json()) == (500, {"message": "Failed to generate recommendations"})
