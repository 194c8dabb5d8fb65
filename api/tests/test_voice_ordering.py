import clients.elevenlabs_client as elevenlabs_client
from config import ElevenLabsSettings
from conftest import fake_response
from schemas.elevenlabs import VoicesInput
from services.elevenlabs_service import list_voices, prioritize_custom_voices, to_voice_out


def _voice(voice_id, category):
    return {
        "voice_id": voice_id,
        "name": voice_id.upper(),
        "category": category,
        "labels": {},
        "description": f"{voice_id} description",
        "preview_url": f"https://cdn.example/{voice_id}.mp3",
        "settings": {"stability": 0.5, "similarity_boost": 0.75},
    }


def test_premade_voices_move_to_the_end_in_order():
    voices = [
        _voice("p1", "premade"),
        _voice("c1", "cloned"),
        _voice("p2", "premade"),
        _voice("g1", "generated"),
        _voice("c2", "cloned"),
        _voice("p3", "premade"),
    ]
    ordered = [v["voice_id"] for v in prioritize_custom_voices(voices)]
    assert ordered == ["c1", "g1", "c2", "p1", "p2", "p3"]


def test_non_premade_categories_share_one_priority():
    voices = [_voice("g1", "generated"), _voice("c1", "cloned"), _voice("x1", "professional")]
    ordered = [v["voice_id"] for v in prioritize_custom_voices(voices)]
    assert ordered == ["g1", "c1", "x1"]


def test_all_premade_keeps_input_order():
    voices = [_voice("p2", "premade"), _voice("p1", "premade")]
    assert [v["voice_id"] for v in prioritize_custom_voices(voices)] == ["p2", "p1"]


def test_input_list_is_not_mutated():
    voices = [_voice("p1", "premade"), _voice("c1", "cloned")]
    prioritize_custom_voices(voices)
    assert [v["voice_id"] for v in voices] == ["p1", "c1"]


def test_empty_list():
    assert prioritize_custom_voices([]) == []


def test_to_voice_out_shape():
    out = to_voice_out(_voice("v1", "cloned"), True)
    assert out == {
        "id": "v1",
        "name": "V1",
        "description": "v1 description",
        "previewUrl": "https://cdn.example/v1.mp3",
        "category": "cloned",
        "default": True,
    }


def _list_voices_with(monkeypatch, voices):
    monkeypatch.setattr(
        elevenlabs_client.requests,
        "get",
        lambda url, headers=None, timeout=None: fake_response(200, {"voices": voices}),
    )
    return list_voices(ElevenLabsSettings(api_key="k"), VoicesInput())["voices"]


def test_all_premade_list_flags_only_the_first(monkeypatch):
    out = _list_voices_with(monkeypatch, [_voice("p1", "premade"), _voice("p2", "premade"), _voice("p3", "premade")])

    assert [v["id"] for v in out] == ["p1", "p2", "p3"]
    assert [v["default"] for v in out] == [True, False, False]


def test_single_voice_is_default(monkeypatch):
    out = _list_voices_with(monkeypatch, [_voice("only", "premade")])

    assert len(out) == 1
    assert out[0]["default"] is True


def test_empty_catalog_has_no_default(monkeypatch):
    assert _list_voices_with(monkeypatch, []) == []
