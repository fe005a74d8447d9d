import logging

from .config import configure_logging
from .presentation import Presentation

# Setup Logging
configure_logging()
logger = logging.getLogger(__name__)


def build_sample() -> Presentation:
    """Sample deck touching every kind of item."""
    presentation = Presentation()

    title_slide = presentation.new_slide("Welcome", background_color="#1E1E2E")
    title_slide.add_text(content="Visually Script", fontSize=48, color="#FFFFFF", textAlign="center")
    title_slide.add_math(content="e^{i\\pi} + 1 = 0", y=120, color="#FFFFFF")
    title_slide.add_shape(shape="arrow", x=400, y=200)
    title_slide.add_sticker(sticker="🚀", size=64, x=600, y=40)
    title_slide.add_character(actions=[{"type": "text", "text": "Ciao!"}])
    title_slide.set_border("solid", color="#FFD700", width=4)
    presentation.add_slide(title_slide)

    presentation.add_youtube(name="Intro video", url="https://youtu.be/dQw4w9WgXcQ")
    presentation.add_pdf(name="Handout", data_url="data:application/pdf;base64,JVBERi0=")
    presentation.add_csv(name="Results", content="run,score\n1,0.93\n2,0.97")
    presentation.add_code_file(name="hello.py", content="print('hello')", language="python")
    presentation.add_code_project(
        title="Landing page",
        files=[
            {"name": "index.html", "language": "html", "content": "<h1>Hi</h1>"},
            {"name": "style.css", "language": "css", "content": "h1 { color: red; }"},
        ],
    )
    presentation.add_quiz(
        title="Check-in",
        questions=[
            {
                "question": "Which transition is the default?",
                "options": [{"text": "fade", "isCorrect": True}, {"text": "zoom"}],
            },
            {"question": "What would you build next?", "timer": 60},
        ],
    )
    presentation.add_qr_code(title="Slides online", url="https://example.com/slides")
    presentation.add_source(title="Visually docs", url="https://example.com/docs", tags=["docs"])
    return presentation


def main():
    presentation = build_sample()
    logger.info(f"Built sample presentation with {len(presentation.media_queue)} items")
    print(presentation.serialize())


if __name__ == "__main__":
    main()
