from typing import Any, Dict, List, Optional

from ..models import (
    GamificationAction,
    GamificationSlideElement,
    ImageSlideElement,
    MathSlideElement,
    ShapeSlideElement,
    StickerSlideElement,
    TextSlideElement,
)
from .ids import IdGenerator, default_id_generator


# Assigned by the builder, never taken from the caller
RESERVED_FIELDS = ("id", "type")

DEFAULT_CHARACTER_ACTION = {"type": "text", "text": "Hello!"}


class SlideElementBuilder:
    """
    Builds fully-populated slide elements from partial properties.

    Caller properties (snake_case or camelCase) override the per-type
    defaults declared on the element models, one field at a time.
    Values are not checked: colors, enum members and geometry go
    through as given.
    """

    def __init__(self, id_generator: Optional[IdGenerator] = None):
        self.id_generator = id_generator or default_id_generator

    def _props(self, props: Dict[str, Any]) -> Dict[str, Any]:
        merged = {k: v for k, v in props.items() if k not in RESERVED_FIELDS}
        merged["id"] = self.id_generator.generate()
        return merged

    def text(self, **props) -> TextSlideElement:
        return TextSlideElement(**self._props(props))

    def image(self, **props) -> ImageSlideElement:
        return ImageSlideElement(**self._props(props))

    def math(self, **props) -> MathSlideElement:
        return MathSlideElement(**self._props(props))

    def shape(self, **props) -> ShapeSlideElement:
        return ShapeSlideElement(**self._props(props))

    def sticker(self, **props) -> StickerSlideElement:
        merged = self._props(props)
        size = merged.pop("size", 100)
        # size drives the box and the glyph scale together
        merged.update(size=size, width=size, height=size)
        merged.pop("fontSize", None)
        merged["font_size"] = size
        return StickerSlideElement(**merged)

    def character(self, **props) -> GamificationSlideElement:
        merged = self._props(props)
        actions = merged.pop("actions", None)
        if actions is None:
            actions = [DEFAULT_CHARACTER_ACTION]
        merged["actions"] = self._actions(actions)
        return GamificationSlideElement(**merged)

    def _actions(self, actions: List[Any]) -> List[GamificationAction]:
        result = []
        for action in actions:
            if isinstance(action, GamificationAction):
                action = action.model_copy()
            else:
                action = GamificationAction(**action)
            if not action.id:
                action.id = self.id_generator.generate()
            result.append(action)
        return result
