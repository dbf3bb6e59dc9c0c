# tests/test_embeds.py
import pytest

from nazarban.embeds import (
    HLS_MIME,
    MP4_MIME,
    NO_EMBED,
    PROVIDERS,
    IframeEmbed,
    NativeVideo,
    NoEmbed,
    get_provider,
    resolve,
    resolve_url,
    select_url,
)


@pytest.mark.parametrize(
    "url",
    [
        "https://youtu.be/abcdefghijk",
        "https://www.youtube.com/watch?v=abcdefghijk",
        "https://www.youtube.com/watch?v=abcdefghijk&t=42s",
        "https://www.youtube.com/embed/abcdefghijk?autoplay=1",
    ],
)
def test_youtube_urls_become_clean_embed(url):
    assert resolve(url, "fa") == IframeEmbed("https://www.youtube.com/embed/abcdefghijk")


def test_youtube_id_keeps_dash_and_underscore():
    assert resolve_url("https://youtu.be/a-b_c-d_e-f") == IframeEmbed(
        "https://www.youtube.com/embed/a-b_c-d_e-f"
    )


def test_youtube_short_id_is_not_youtube():
    # 10 characters: no provider claims it and there is no "embed" in it
    assert resolve_url("https://youtu.be/abcdefghij") == NO_EMBED


@pytest.mark.parametrize("url", ["https://vimeo.com/12345", "https://vimeo.com/video/12345"])
def test_vimeo(url):
    assert resolve(url, "en") == IframeEmbed("https://player.vimeo.com/video/12345")


def test_aparat():
    assert resolve("https://www.aparat.com/v/abcDEF123", "fa") == IframeEmbed(
        "https://www.aparat.com/video/video/embed/videohash/abcDEF123/vt/frame"
    )


def test_arvan_hls_stream():
    url = "https://cdn123.arvanvod.ir/channel1/master.m3u8"
    assert resolve(url, "fa") == NativeVideo(url, HLS_MIME)


def test_arvan_without_extension_is_still_native():
    url = "https://cdn123.arvanvod.ir/channel1/abcd1234"
    assert resolve_url(url) == NativeVideo(url, MP4_MIME)


def test_direct_mp4():
    url = "https://example.com/video.mp4"
    assert resolve(url, "en") == NativeVideo(url, MP4_MIME)


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/clip.webm",
        "https://example.com/clip.ogg",
        "https://example.com/CLIP.MP4",
        "https://example.com/clip.mp4?token=abc",
    ],
)
def test_direct_files_play_natively_as_mp4(url):
    assert resolve_url(url) == NativeVideo(url, MP4_MIME)


def test_hls_extension_is_case_insensitive():
    url = "https://example.com/live/INDEX.M3U8"
    assert resolve_url(url) == NativeVideo(url, HLS_MIME)


def test_existing_embed_url_is_kept():
    url = "https://player.example.com/embed/42"
    assert resolve_url(url) == IframeEmbed(url)


def test_provider_order_youtube_before_embed_fallback():
    embed = resolve_url("https://www.youtube.com/embed/abcdefghijk")
    assert embed.provider == "youtube"


def test_provider_order_vimeo_before_direct_file():
    assert resolve_url("https://vimeo.com/777/download.mp4") == IframeEmbed(
        "https://player.vimeo.com/video/777"
    )


@pytest.mark.parametrize(
    "reference",
    ["", None, "https://example.com/page", "not a url", "http://[broken", 12345, ["https://youtu.be/abcdefghijk"]],
)
def test_unplayable_input_is_no_embed(reference):
    assert resolve(reference, "fa") == NO_EMBED


def test_bilingual_falls_back_from_empty_english_to_farsi():
    reference = {"en": "", "fa": "https://youtu.be/abcdefghijk"}
    assert resolve(reference, "en") == IframeEmbed("https://www.youtube.com/embed/abcdefghijk")


def test_bilingual_chain_collapses_when_preferred_is_en():
    # requested "en" and fixed "en" are the same slot; only "fa" remains
    assert select_url({"en": "", "fa": "b"}, "en") == "b"
    assert select_url({"en": "a", "fa": "b"}, "en") == "a"
    assert select_url({"en": ""}, "en") == ""


def test_bilingual_prefers_requested_language():
    reference = {"en": "https://vimeo.com/1", "fa": "https://vimeo.com/2"}
    assert resolve(reference, "fa") == IframeEmbed("https://player.vimeo.com/video/2")
    assert resolve(reference, "en") == IframeEmbed("https://player.vimeo.com/video/1")


def test_unknown_language_falls_back_to_en_then_fa():
    assert select_url({"en": "a", "fa": "b"}, "de") == "a"
    assert select_url({"fa": "b"}, "de") == "b"
    assert select_url({"de": "c", "fa": "b"}, "de") == "c"


def test_non_string_entries_count_as_empty():
    assert select_url({"en": None, "fa": 7}, "en") == ""
    assert resolve({"en": None, "fa": 7}, "en") == NO_EMBED


def test_empty_mapping_is_no_embed():
    assert resolve({}, "fa") == NO_EMBED


def test_resolve_is_idempotent():
    reference = {"en": "https://example.com/a.m3u8", "fa": ""}
    assert resolve(reference, "en") == resolve(reference, "en")


def test_provider_is_not_part_of_equality():
    assert IframeEmbed("u", provider="youtube") == IframeEmbed("u")
    assert NativeVideo("u", MP4_MIME, provider="direct") == NativeVideo("u", MP4_MIME)


def test_kinds_and_json_form():
    assert isinstance(NO_EMBED, NoEmbed)
    assert NO_EMBED.to_dict() == {"kind": "none", "url": None, "mimeType": None, "provider": None}

    video = resolve_url("https://cdn123.arvanvod.ir/channel1/master.m3u8")
    assert video.kind == "video"
    assert video.to_dict()["mimeType"] == HLS_MIME

    iframe = resolve_url("https://vimeo.com/12345")
    assert iframe.to_dict() == {
        "kind": "iframe",
        "url": "https://player.vimeo.com/video/12345",
        "mimeType": None,
        "provider": "vimeo",
    }


def test_provider_table_order():
    assert [p.name for p in PROVIDERS] == ["youtube", "vimeo", "aparat", "arvan", "direct", "embed"]


def test_get_provider():
    assert get_provider("aparat").name == "aparat"
    with pytest.raises(ValueError):
        get_provider("dailymotion")
