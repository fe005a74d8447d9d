import json
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .config import Settings, get_settings
from .models import MediaItem, SourceItem, dump
from .services.diagnostics import Diagnostic, DiagnosticSink
from .services.ids import IdGenerator, default_id_generator
from .services.media import MediaItemFactory
from .slide import Slide

logger = logging.getLogger(__name__)


class Presentation:
    """
    The main class for creating a Visually presentation.

    Owns the media queue (playback order = call order) and the source list.
    Every add_* method returns the presentation itself so calls can be chained.
    Inputs that cannot become a valid item (a YouTube URL without a video id,
    a CSV without data) are skipped and reported through the diagnostics.
    """

    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        on_diagnostic: Optional[Callable[[Diagnostic], None]] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.id_generator = id_generator or default_id_generator
        self._diagnostics = DiagnosticSink(on_diagnostic)
        self.factory = MediaItemFactory(
            self.id_generator,
            self._diagnostics,
            default_transition=self.settings.default_transition,
        )
        self._media_queue: List[MediaItem] = []
        self._sources: List[SourceItem] = []

    @property
    def media_queue(self) -> Tuple[MediaItem, ...]:
        return tuple(self._media_queue)

    @property
    def sources(self) -> Tuple[SourceItem, ...]:
        return tuple(self._sources)

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return tuple(self._diagnostics.events)

    def _append(self, item: Optional[MediaItem]) -> "Presentation":
        if item is not None:
            self._media_queue.append(item)
            logger.debug(f"Queued {item.type} item '{item.name}' (ID: {item.id})")
        return self

    def add_media_item(self, item) -> "Presentation":
        return self._append(self.factory.from_payload(item))

    def add_image(self, name: str, data_url: str, **kwargs) -> "Presentation":
        return self._append(self.factory.image(name, data_url, **kwargs))

    def add_pdf(self, name: str, data_url: str, **kwargs) -> "Presentation":
        return self._append(self.factory.pdf(name, data_url, **kwargs))

    def add_video(self, name: str, data_url: str, **kwargs) -> "Presentation":
        return self._append(self.factory.video(name, data_url, **kwargs))

    def add_office(self, name: str, data_url: str = None, **kwargs) -> "Presentation":
        return self._append(self.factory.office(name, data_url, **kwargs))

    def add_url(self, name: str, url: str, **kwargs) -> "Presentation":
        return self._append(self.factory.url(name, url, **kwargs))

    def add_youtube(self, name: str, url: str, **kwargs) -> "Presentation":
        return self._append(self.factory.youtube(name, url, **kwargs))

    def add_code_file(self, name: str, content: str, language: str, **kwargs) -> "Presentation":
        return self._append(self.factory.code_file(name, content, language, **kwargs))

    def add_csv(self, name: str, content: str = None, **kwargs) -> "Presentation":
        return self._append(self.factory.csv(name, content, **kwargs))

    def add_quiz(self, title: str, questions: Sequence[Any] = (), **kwargs) -> "Presentation":
        return self._append(self.factory.quiz(title, questions, **kwargs))

    def add_code_project(self, title: str, files: Sequence[Any] = (), **kwargs) -> "Presentation":
        return self._append(self.factory.code_project(title, files, **kwargs))

    def add_qr_code(self, title: str, url: str, **kwargs) -> "Presentation":
        return self._append(self.factory.qr_code(title, url, **kwargs))

    def new_slide(self, title: str, background_color: str = "#FFFFFF") -> Slide:
        """Returns a Slide sharing this presentation's id generator. It is not queued until add_slide."""
        return Slide(title, background_color=background_color, id_generator=self.id_generator)

    def add_slide(self, slide: Slide, **kwargs) -> "Presentation":
        """Adds a custom slide; the queue keeps a copy taken now."""
        return self._append(self.factory.created_slide(slide, **kwargs))

    def add_source(self, title: str, url: str, notes: str = None, tags: Optional[Sequence[str]] = None) -> "Presentation":
        source = SourceItem(
            id=self.id_generator.generate(),
            title=title,
            url=url,
            notes=notes,
            tags=list(tags) if tags is not None else None,
        )
        self._sources.append(source)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mediaQueue": [dump(item) for item in self._media_queue],
            "sources": [dump(source) for source in self._sources],
        }

    def serialize(self) -> str:
        """
        Exports the presentation to a JSON string compatible with Visually's import.
        The presentation stays mutable; serialize again to see later changes.
        """
        return json.dumps(self.to_dict(), indent=self.settings.json_indent, ensure_ascii=False)

    to_json = serialize
