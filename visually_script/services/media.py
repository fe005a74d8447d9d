"""
Factory degli elementi della media queue.
Ogni metodo completa l'input del chiamante con i default del tipo,
assegna l'id e restituisce il record pronto, oppure None se l'input va scartato.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError

from ..models import (
    MEDIA_ITEM_TYPES,
    CodeFile,
    CodeFileMediaItem,
    CodeProject,
    CodeProjectMediaItem,
    CreatedSlideMediaItem,
    CsvMediaItem,
    CustomMediaItem,
    ImageMediaItem,
    MediaItem,
    MultipleChoiceQuestion,
    OfficeMediaItem,
    PdfMediaItem,
    PresentationSlide,
    QrCodeMediaItem,
    Quiz,
    QuizMediaItem,
    UrlMediaItem,
    VideoMediaItem,
    YouTubeMediaItem,
)
from .diagnostics import CSV_WITHOUT_DATA, INVALID_YOUTUBE_URL, DiagnosticSink
from .ids import IdGenerator, default_id_generator
from .tabular import parse_csv_content, render_csv_content

logger = logging.getLogger(__name__)

YOUTUBE_REGEX = re.compile(
    r'(?:https?://)?(?:www\.)?(?:youtube\.com/(?:watch\?v=|embed/|v/)|youtu\.be/)([a-zA-Z0-9_-]{11})'
)
YOUTUBE_EMBED_BASE = "https://www.youtube-nocookie.com/embed/"


def get_youtube_embed_url(url: str) -> Optional[str]:
    match = YOUTUBE_REGEX.search(url or "")
    if match and match.group(1):
        return f"{YOUTUBE_EMBED_BASE}{match.group(1)}"
    return None


class MediaItemFactory:
    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        diagnostics: Optional[DiagnosticSink] = None,
        default_transition: str = "fade",
    ):
        self.id_generator = id_generator or default_id_generator
        self.diagnostics = diagnostics or DiagnosticSink()
        self.default_transition = default_transition

    def _new_id(self) -> str:
        return self.id_generator.generate()

    def _build(self, model_cls, **fields) -> MediaItem:
        fields = {k: v for k, v in fields.items() if v is not None}
        fields["id"] = self._new_id()
        fields.setdefault("transition", self.default_transition)
        return model_cls(**fields)

    # --- GENERIC ---

    def from_payload(self, payload: Union[Dict[str, Any], BaseModel]) -> MediaItem:
        """
        Escape hatch for pre-shaped items. Known kinds are validated into their
        own model (defaults included) and keep any extra host fields; unknown
        kinds, or payloads their own model rejects, are kept as given.
        """
        if isinstance(payload, BaseModel):
            item = payload.model_copy(deep=True, update={"id": self._new_id()})
            if not item.transition:
                item.transition = self.default_transition
            return item

        data = {k: v for k, v in payload.items() if k != "id"}
        model_cls = MEDIA_ITEM_TYPES.get(data.get("type"), CustomMediaItem)
        if not data.get("transition"):
            data["transition"] = self.default_transition
        data["id"] = self._new_id()
        try:
            return model_cls(**data)
        except ValidationError as e:
            logger.debug(f"Payload of type '{data.get('type')}' kept as custom item: {e}")
            return CustomMediaItem(**data)

    # --- FILE BASED ---

    def image(self, name: str, data_url: str, notes: str = None, transition: str = None) -> ImageMediaItem:
        return self._build(ImageMediaItem, name=name, data_url=data_url, notes=notes, transition=transition)

    def pdf(self, name: str, data_url: str, notes: str = None, transition: str = None, current_page: int = 1) -> PdfMediaItem:
        return self._build(
            PdfMediaItem, name=name, data_url=data_url, notes=notes, transition=transition, current_page=current_page
        )

    def video(
        self,
        name: str,
        data_url: str,
        notes: str = None,
        transition: str = None,
        start_time: float = 0,
        timestamps: Optional[List[Dict[str, Any]]] = None,
    ) -> VideoMediaItem:
        return self._build(
            VideoMediaItem,
            name=name,
            data_url=data_url,
            notes=notes,
            transition=transition,
            start_time=start_time,
            timestamps=list(timestamps or []),
        )

    def office(self, name: str, data_url: str = None, notes: str = None, transition: str = None) -> OfficeMediaItem:
        return self._build(OfficeMediaItem, name=name, data_url=data_url, notes=notes, transition=transition)

    def code_file(self, name: str, content: str, language: str, notes: str = None, transition: str = None) -> CodeFileMediaItem:
        # language is expected in CODE_LANGUAGES, not enforced here
        return self._build(
            CodeFileMediaItem, name=name, content=content, language=language, notes=notes, transition=transition
        )

    def csv(
        self,
        name: str,
        content: str = None,
        headers: Optional[Sequence[str]] = None,
        rows: Optional[Sequence[Sequence[Any]]] = None,
        notes: str = None,
        transition: str = None,
    ) -> Optional[CsvMediaItem]:
        if content is None and rows is None:
            self.diagnostics.emit(
                CSV_WITHOUT_DATA,
                f"CSV item '{name}' has neither content nor rows, skipping",
                name=name,
            )
            return None

        if content is not None and (headers is None or rows is None):
            parsed_headers, parsed_rows = parse_csv_content(content)
            headers = parsed_headers if headers is None else headers
            rows = parsed_rows if rows is None else rows
        elif content is None:
            headers = headers or []
            content = render_csv_content(headers, rows)
        # se ci sono sia content che rows li teniamo cosi' come sono

        return self._build(
            CsvMediaItem,
            name=name,
            content=content,
            headers=list(headers or []),
            rows=[list(row) for row in rows],
            notes=notes,
            transition=transition,
        )

    # --- LINKS ---

    def url(self, name: str, url: str, notes: str = None, transition: str = None) -> UrlMediaItem:
        return self._build(UrlMediaItem, name=name, url=url, notes=notes, transition=transition)

    def youtube(self, name: str, url: str, notes: str = None, transition: str = None) -> Optional[YouTubeMediaItem]:
        embed_url = get_youtube_embed_url(url)
        if not embed_url:
            self.diagnostics.emit(
                INVALID_YOUTUBE_URL,
                f"Invalid YouTube URL provided, skipping: {url}",
                name=name,
                url=url,
            )
            return None
        return self._build(
            YouTubeMediaItem, name=name, url=url, embed_url=embed_url, notes=notes, transition=transition
        )

    def qr_code(
        self,
        title: str,
        url: str,
        description: str = None,
        background_color: str = None,
        scan_count: int = None,
        qr_options: Optional[Dict[str, Any]] = None,
        notes: str = None,
        transition: str = None,
    ) -> QrCodeMediaItem:
        return self._build(
            QrCodeMediaItem,
            name=title,
            title=title,
            url=url,
            description=description,
            background_color=background_color,
            scan_count=scan_count,
            qr_options=dict(qr_options) if qr_options is not None else None,
            notes=notes,
            transition=transition,
        )

    # --- COMPOSITE ---

    def created_slide(self, slide, notes: str = None, transition: str = None) -> CreatedSlideMediaItem:
        """Wraps a Slide builder (or a bare PresentationSlide) taking a snapshot of it."""
        if isinstance(slide, PresentationSlide):
            snapshot = slide.model_copy(deep=True)
        else:
            snapshot = slide.snapshot()
        return self._build(
            CreatedSlideMediaItem, name=snapshot.title, slide=snapshot, notes=notes, transition=transition
        )

    def quiz(
        self,
        title: str,
        questions: Optional[Iterable[Any]] = None,
        notes: str = None,
        transition: str = None,
    ) -> QuizMediaItem:
        quiz = Quiz(title=title, questions=[self._question_payload(q) for q in questions or []])
        quiz.id = quiz.id or self._new_id()
        for question in quiz.questions:
            question.id = question.id or self._new_id()
            if isinstance(question, MultipleChoiceQuestion):
                for option in question.options:
                    option.id = option.id or self._new_id()
        return self._build(QuizMediaItem, name=title, quiz=quiz, notes=notes, transition=transition)

    @staticmethod
    def _question_payload(question: Any) -> Any:
        if isinstance(question, BaseModel):
            return question.model_copy(deep=True)
        question = dict(question)
        # senza tipo esplicito: a scelta multipla solo se ha delle opzioni
        question.setdefault("type", "multiple-choice" if question.get("options") else "open-text")
        return question

    def code_project(
        self,
        title: str,
        files: Optional[Iterable[Any]] = None,
        view_mode: str = None,
        notes: str = None,
        transition: str = None,
    ) -> CodeProjectMediaItem:
        project = CodeProject(
            title=title,
            files=[f.model_copy() if isinstance(f, CodeFile) else f for f in files or []],
        )
        project.id = project.id or self._new_id()
        for code_file in project.files:
            code_file.id = code_file.id or self._new_id()
        return self._build(
            CodeProjectMediaItem, name=title, project=project, view_mode=view_mode, notes=notes, transition=transition
        )
