import logging
from typing import Optional, Tuple

from .models import PresentationSlide, SlideBorder, SlideElement
from .services.elements import SlideElementBuilder
from .services.ids import IdGenerator, default_id_generator

logger = logging.getLogger(__name__)


class Slide:
    """
    A custom slide that can be built up and then added to a presentation.

    The builder stays mutable; the presentation stores a snapshot taken
    when the slide is added, so later changes do not reach the queued copy.
    """

    def __init__(self, title: str, background_color: str = "#FFFFFF", id_generator: Optional[IdGenerator] = None):
        self.id_generator = id_generator or default_id_generator
        self.builder = SlideElementBuilder(self.id_generator)
        self.slide = PresentationSlide(
            id=self.id_generator.generate(),
            title=title,
            background_color=background_color,
        )

    @property
    def id(self) -> str:
        return self.slide.id

    @property
    def title(self) -> str:
        return self.slide.title

    @property
    def elements(self) -> Tuple[SlideElement, ...]:
        return tuple(self.slide.elements)

    def _add_element(self, element: SlideElement) -> "Slide":
        # Painter's order: later elements render on top
        self.slide.elements.append(element)
        logger.debug(f"Slide {self.slide.id}: added {element.type} element {element.id}")
        return self

    def add_text(self, **props) -> "Slide":
        return self._add_element(self.builder.text(**props))

    def add_image(self, **props) -> "Slide":
        return self._add_element(self.builder.image(**props))

    def add_math(self, **props) -> "Slide":
        return self._add_element(self.builder.math(**props))

    def add_shape(self, **props) -> "Slide":
        return self._add_element(self.builder.shape(**props))

    def add_sticker(self, **props) -> "Slide":
        return self._add_element(self.builder.sticker(**props))

    def add_character(self, **props) -> "Slide":
        return self._add_element(self.builder.character(**props))

    def set_background_color(self, color: str) -> "Slide":
        self.slide.background_color = color
        return self

    def set_background_image_url(self, url: str) -> "Slide":
        self.slide.background_image_url = url
        return self

    def set_border(self, style: str, color: Optional[str] = None, width: Optional[float] = None) -> "Slide":
        """Style always replaces the previous one; color and width only when given."""
        border = self.slide.border or SlideBorder(style=style)
        border.style = style
        if color is not None:
            border.color = color
        if width is not None:
            border.width = width
        self.slide.border = border
        return self

    def snapshot(self) -> PresentationSlide:
        return self.slide.model_copy(deep=True)
