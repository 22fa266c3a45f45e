"""Jinja2 environment shared by all HTML routes."""

from fastapi.templating import Jinja2Templates

from traininglog.core.config import settings


def seq(n: int) -> list[int]:
    """``[1, ..., n]`` for rendering numbered set inputs."""
    return list(range(1, n + 1))


def join_values(values) -> str:
    return ", ".join(str(v) for v in values or [])


templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)
templates.env.globals["seq"] = seq
templates.env.filters["join_values"] = join_values
