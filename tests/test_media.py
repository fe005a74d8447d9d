"""Tests for the media item factory."""

import pytest

from visually_script.models import (
    CodeFile,
    CustomMediaItem,
    ImageMediaItem,
    MultipleChoiceQuestion,
    OpenTextQuestion,
    PdfMediaItem,
    dump,
)
from visually_script.services.diagnostics import CSV_WITHOUT_DATA, INVALID_YOUTUBE_URL, DiagnosticSink
from visually_script.services.media import MediaItemFactory, get_youtube_embed_url


@pytest.fixture
def sink():
    return DiagnosticSink()


@pytest.fixture
def factory(id_generator, sink):
    return MediaItemFactory(id_generator, sink)


class TestYouTubeEmbed:
    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "http://youtube.com/watch?v=dQw4w9WgXcQ&t=42",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://www.youtube.com/v/dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "youtu.be/dQw4w9WgXcQ",
        ],
    )
    def test_recognized_shapes(self, url):
        assert get_youtube_embed_url(url) == "https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ"

    @pytest.mark.parametrize(
        "url",
        ["not-a-url", "https://vimeo.com/123456", "https://youtu.be/short", ""],
    )
    def test_unrecognized(self, url):
        assert get_youtube_embed_url(url) is None

    def test_invalid_url_is_dropped_with_diagnostic(self, factory, sink):
        assert factory.youtube(name="Bad", url="not-a-url") is None

        assert len(sink.events) == 1
        assert sink.events[0].code == INVALID_YOUTUBE_URL
        assert sink.events[0].input["url"] == "not-a-url"
        assert "not-a-url" in sink.events[0].message

    def test_valid_url(self, factory, sink):
        item = factory.youtube(name="Clip", url="https://youtu.be/dQw4w9WgXcQ")

        assert item.embed_url == "https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ"
        assert item.url == "https://youtu.be/dQw4w9WgXcQ"
        assert sink.events == []


class TestSimpleKinds:
    def test_image(self, factory):
        data = dump(factory.image(name="Pic", data_url="data:image/png;base64,AAA"))

        assert data["type"] == "image"
        assert data["dataUrl"] == "data:image/png;base64,AAA"
        assert data["transition"] == "fade"
        assert "notes" not in data

    def test_pdf_starts_on_first_page(self, factory):
        assert factory.pdf(name="Doc", data_url="data:x").current_page == 1

    def test_video_defaults(self, factory):
        data = dump(factory.video(name="Clip", data_url="data:video"))

        assert data["startTime"] == 0
        assert data["timestamps"] == []

    def test_office_without_data_url(self, factory):
        data = dump(factory.office(name="Deck.pptx"))

        assert data["type"] == "office"
        assert "dataUrl" not in data

    def test_url(self, factory):
        item = factory.url(name="Site", url="https://example.com", notes="read later", transition="zoom")

        assert item.notes == "read later"
        assert item.transition == "zoom"

    def test_code_file_language_not_enforced(self, factory):
        item = factory.code_file(name="main.go", content="package main", language="go")

        assert item.type == "code-file"
        assert item.language == "go"

    def test_default_transition_is_configurable(self, id_generator):
        factory = MediaItemFactory(id_generator, default_transition="slide")

        assert factory.image(name="Pic", data_url="x").transition == "slide"


class TestCsv:
    def test_content_derives_headers_and_rows(self, factory):
        item = factory.csv(name="t", content="a,b\n1,x\n2,y")

        assert item.headers == ["a", "b"]
        assert item.rows == [[1, "x"], [2, "y"]]
        assert item.content == "a,b\n1,x\n2,y"

    def test_rows_derive_content(self, factory):
        item = factory.csv(name="t", headers=["a", "b"], rows=[[1, "x"], [2, "y"]])

        assert item.content == "a,b\n1,x\n2,y"

    def test_rows_without_headers(self, factory):
        item = factory.csv(name="t", rows=[[1, 2]])

        assert item.headers == []
        assert item.content == "1,2"

    def test_content_and_rows_trusted_as_is(self, factory):
        item = factory.csv(name="t", content="whatever", headers=["h"], rows=[[9]])

        assert item.content == "whatever"
        assert item.headers == ["h"]
        assert item.rows == [[9]]

    def test_no_data_is_dropped_with_diagnostic(self, factory, sink):
        assert factory.csv(name="t") is None

        assert [e.code for e in sink.events] == [CSV_WITHOUT_DATA]
        assert sink.events[0].input == {"name": "t"}


class TestQuiz:
    def test_ids_assigned(self, factory):
        item = factory.quiz(
            title="Check",
            questions=[
                {"question": "2+2?", "options": [{"text": "4", "isCorrect": True}, {"text": "5"}]},
                {"question": "Why?"},
            ],
        )

        assert item.name == "Check"
        assert item.quiz.id
        mc, open_text = item.quiz.questions
        assert isinstance(mc, MultipleChoiceQuestion)
        assert isinstance(open_text, OpenTextQuestion)
        assert mc.id and open_text.id
        assert all(option.id for option in mc.options)
        assert [o.is_correct for o in mc.options] == [True, False]
        assert mc.timer == 30

    def test_existing_ids_kept(self, factory):
        item = factory.quiz(
            title="Check",
            questions=[
                {
                    "id": "q1",
                    "type": "multiple-choice",
                    "question": "Pick",
                    "timer": 10,
                    "options": [{"id": "o1", "text": "A"}],
                },
            ],
        )

        question = item.quiz.questions[0]
        assert question.id == "q1"
        assert question.options[0].id == "o1"
        assert question.timer == 10

    def test_open_text_serializes_without_options(self, factory):
        item = factory.quiz(title="Open", questions=[OpenTextQuestion(question="Thoughts?")])
        data = dump(item)

        question = data["quiz"]["questions"][0]
        assert question["type"] == "open-text"
        assert "options" not in question


class TestCodeProject:
    def test_defaults_and_ids(self, factory):
        item = factory.code_project(
            title="Site",
            files=[
                {"name": "index.html", "language": "html", "content": "<p>hi</p>"},
                CodeFile(id="css-1", name="style.css", language="css", content="p {}"),
            ],
        )

        assert item.name == "Site"
        assert item.view_mode == "overview"
        assert item.project.id
        assert item.project.files[0].id
        assert item.project.files[1].id == "css-1"

    def test_view_mode_override(self, factory):
        assert factory.code_project(title="Site", view_mode="editor").view_mode == "editor"


class TestQrCode:
    def test_defaults(self, factory):
        data = dump(factory.qr_code(title="Join", url="https://example.com/join"))

        assert data["type"] == "qr-code"
        assert data["name"] == "Join"
        assert data["title"] == "Join"
        assert data["description"] == "Scan the code"
        assert data["backgroundColor"] == "#FFFFFF"
        assert data["scanCount"] == 0
        assert data["qrOptions"] == {}

    def test_overrides(self, factory):
        item = factory.qr_code(title="Join", url="u", description="Vote", qr_options={"margin": 2})

        assert item.description == "Vote"
        assert item.qr_options == {"margin": 2}


class TestFromPayload:
    def test_known_kind_gets_defaults_and_fresh_id(self, factory):
        item = factory.from_payload({"id": "fixed", "type": "pdf", "name": "Doc", "dataUrl": "data:x"})

        assert isinstance(item, PdfMediaItem)
        assert item.id != "fixed"
        assert item.current_page == 1
        assert item.transition == "fade"

    def test_known_kind_keeps_extra_host_fields(self, factory):
        item = factory.from_payload({"type": "image", "name": "Pic", "dataUrl": "data:x", "caption": "hi"})

        assert isinstance(item, ImageMediaItem)
        assert dump(item)["caption"] == "hi"

    def test_known_kind_missing_fields_kept_as_given(self, factory):
        """A payload its own model cannot accept is still queued, not rejected."""
        item = factory.from_payload({"type": "youtube", "name": "v", "url": "u"})
        data = dump(item)

        assert isinstance(item, CustomMediaItem)
        assert data["type"] == "youtube"
        assert data["url"] == "u"
        assert data["transition"] == "fade"
        assert "embedUrl" not in data

    def test_unknown_kind_keeps_extra_fields(self, factory):
        item = factory.from_payload({"type": "whiteboard", "name": "Board", "strokes": [1, 2]})
        data = dump(item)

        assert data["type"] == "whiteboard"
        assert data["strokes"] == [1, 2]
        assert data["transition"] == "fade"

    def test_model_payload_is_copied(self, factory):
        original = factory.image(name="Pic", data_url="x")
        item = factory.from_payload(original)

        assert item is not original
        assert item.id != original.id
