from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = Union[int, float]

TRANSITIONS = ("fade", "slide", "zoom", "none")
TEXT_ANIMATIONS = ("none", "fadeIn", "slideIn", "bounce", "typewriter")
SHAPES = ("rectangle", "arrow", "line")
BORDER_STYLES = ("solid", "dashed", "dotted", "double", "ants")
CODE_LANGUAGES = ("html", "css", "javascript", "python", "rust")


class VisuallyModel(BaseModel):
    # snake_case in Python, camelCase in the exported JSON
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- SLIDE ELEMENTS ---

class SlideElementBase(VisuallyModel):
    # Geometry, colors, content and enum-like values are stored as given
    id: str
    x: Any = 10
    y: Any = 10
    width: Any
    height: Any


class TextSlideElement(SlideElementBase):
    type: Literal["text"] = "text"
    content: Any = "New Text"
    width: Any = 300
    height: Any = 50
    font_size: Any = 24
    color: Any = "#000000"
    font_family: Any = "Alegreya"
    font_weight: Any = None
    font_style: Any = None
    text_align: Any = None
    animation: Any = "none"


class ImageSlideElement(SlideElementBase):
    type: Literal["image"] = "image"
    src: Any = "https://placehold.co/300x200.png"
    width: Any = 300
    height: Any = 200
    alt: Any = None


class MathSlideElement(SlideElementBase):
    type: Literal["math"] = "math"
    content: Any = "E = mc^2"
    width: Any = 200
    height: Any = 60
    font_size: Any = 24
    color: Any = "#000000"


class ShapeSlideElement(SlideElementBase):
    type: Literal["shape"] = "shape"
    shape: Any = "rectangle"
    width: Any = 150
    height: Any = 100
    stroke_color: Any = "#000000"
    stroke_width: Any = 2
    fill_color: Any = "transparent"


class StickerSlideElement(SlideElementBase):
    type: Literal["sticker"] = "sticker"
    sticker: Any = "⭐"
    size: Any = 100
    width: Any = 100
    height: Any = 100
    font_size: Any = 100
    rotation: Any = 0


class GamificationAction(VisuallyModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    type: str = "text"
    text: Any = None


class GamificationSlideElement(SlideElementBase):
    type: Literal["gamification"] = "gamification"
    character: Any = "char1"
    x: Any = 50
    y: Any = 350
    width: Any = 150
    height: Any = 200
    actions: List[GamificationAction] = Field(default_factory=list)


SlideElement = Annotated[
    Union[
        TextSlideElement,
        ImageSlideElement,
        MathSlideElement,
        ShapeSlideElement,
        StickerSlideElement,
        GamificationSlideElement,
    ],
    Field(discriminator="type"),
]


class SlideBorder(VisuallyModel):
    style: Any
    color: Any = None
    width: Any = None


class PresentationSlide(VisuallyModel):
    id: str
    title: str
    elements: List[SlideElement] = Field(default_factory=list)
    background_color: Any = "#FFFFFF"
    background_image_url: Any = None
    border: Optional[SlideBorder] = None


# --- QUIZ / CODE PROJECT ---

class QuizAnswerOption(VisuallyModel):
    id: Optional[str] = None
    text: str
    is_correct: bool = False


class MultipleChoiceQuestion(VisuallyModel):
    id: Optional[str] = None
    type: Literal["multiple-choice"] = "multiple-choice"
    question: str
    options: List[QuizAnswerOption] = Field(default_factory=list)
    timer: Number = 30


class OpenTextQuestion(VisuallyModel):
    id: Optional[str] = None
    type: Literal["open-text"] = "open-text"
    question: str
    timer: Number = 30


QuizQuestion = Annotated[
    Union[MultipleChoiceQuestion, OpenTextQuestion],
    Field(discriminator="type"),
]


class Quiz(VisuallyModel):
    id: Optional[str] = None
    title: str
    questions: List[QuizQuestion] = Field(default_factory=list)


class CodeFile(VisuallyModel):
    id: Optional[str] = None
    name: str
    language: str
    content: str = ""


class CodeProject(VisuallyModel):
    id: Optional[str] = None
    title: str
    files: List[CodeFile] = Field(default_factory=list)


# --- MEDIA QUEUE ---

class MediaItemBase(VisuallyModel):
    # host-side fields beyond the declared ones are kept
    model_config = ConfigDict(extra="allow")

    id: str
    type: str
    name: str
    notes: Optional[str] = None
    transition: Optional[str] = "fade"


class ImageMediaItem(MediaItemBase):
    type: Literal["image"] = "image"
    data_url: str


class PdfMediaItem(MediaItemBase):
    type: Literal["pdf"] = "pdf"
    data_url: str
    current_page: int = 1


class VideoMediaItem(MediaItemBase):
    type: Literal["video"] = "video"
    data_url: str
    start_time: Number = 0
    timestamps: List[Dict[str, Any]] = Field(default_factory=list)


class OfficeMediaItem(MediaItemBase):
    type: Literal["office"] = "office"
    data_url: Optional[str] = None


class UrlMediaItem(MediaItemBase):
    type: Literal["url"] = "url"
    url: str


class YouTubeMediaItem(MediaItemBase):
    type: Literal["youtube"] = "youtube"
    url: str
    embed_url: str


class CodeFileMediaItem(MediaItemBase):
    type: Literal["code-file"] = "code-file"
    content: str
    language: str


class CsvMediaItem(MediaItemBase):
    type: Literal["csv"] = "csv"
    content: str
    headers: List[str] = Field(default_factory=list)
    rows: List[List[Union[int, float, str]]] = Field(default_factory=list)


class CreatedSlideMediaItem(MediaItemBase):
    type: Literal["created-slide"] = "created-slide"
    slide: PresentationSlide


class QuizMediaItem(MediaItemBase):
    type: Literal["quiz"] = "quiz"
    quiz: Quiz


class CodeProjectMediaItem(MediaItemBase):
    type: Literal["code-project"] = "code-project"
    project: CodeProject
    view_mode: str = "overview"


class QrCodeMediaItem(MediaItemBase):
    type: Literal["qr-code"] = "qr-code"
    title: str
    url: str
    description: Optional[str] = "Scan the code"
    background_color: Optional[str] = "#FFFFFF"
    scan_count: int = 0
    qr_options: Dict[str, Any] = Field(default_factory=dict)


class CustomMediaItem(MediaItemBase):
    """Kinds unknown to this library (or payloads their own model rejects), kept as given."""


MediaItem = Union[
    ImageMediaItem,
    PdfMediaItem,
    VideoMediaItem,
    OfficeMediaItem,
    UrlMediaItem,
    YouTubeMediaItem,
    CodeFileMediaItem,
    CsvMediaItem,
    CreatedSlideMediaItem,
    QuizMediaItem,
    CodeProjectMediaItem,
    QrCodeMediaItem,
    CustomMediaItem,
]

MEDIA_ITEM_TYPES = {
    cls.model_fields["type"].default: cls
    for cls in (
        ImageMediaItem,
        PdfMediaItem,
        VideoMediaItem,
        OfficeMediaItem,
        UrlMediaItem,
        YouTubeMediaItem,
        CodeFileMediaItem,
        CsvMediaItem,
        CreatedSlideMediaItem,
        QuizMediaItem,
        CodeProjectMediaItem,
        QrCodeMediaItem,
    )
}


class SourceItem(VisuallyModel):
    id: str
    title: str
    url: str
    notes: Optional[str] = None
    tags: Optional[List[str]] = None


def dump(model: BaseModel) -> Dict[str, Any]:
    """Host-facing dict: camelCase keys, unset optionals omitted."""
    return model.model_dump(by_alias=True, exclude_none=True)
