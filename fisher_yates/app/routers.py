# fisher_yates/app/routers.py
import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from fisher_yates.services.random_source import make_rng
from fisher_yates.services.shuffler import (
    FisherYatesShufflerService,
    ShufflerService,
    split_tokens,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Fisher-Yates"])


def get_shuffler(request: Request) -> ShufflerService:
    """
    FastAPI-dependency: свежий шафлер со своим генератором на каждый запрос.
    Источник случайности — из настроек приложения (app.state.settings).
    """
    cfg = request.app.state.settings
    return FisherYatesShufflerService(make_rng(cfg.random_source))


@router.get(
    "/FisherYates",
    response_class=PlainTextResponse,
    summary="Перемешать дефисные элементы алгоритмом Фишера–Йетса",
    response_description='Перемешанная строка, например "C-D-A-B"',
)
def fisher_yates_index(
    input: str = Query(
        ...,
        description='Элементы через дефис, например "D-B-A-C". Пустая строка допустима.',
        examples=["D-B-A-C"],
    ),
    shuffler: ShufflerService = Depends(get_shuffler),
):
    logger.debug("FisherYates: %d токенов", len(split_tokens(input)))
    # text/plain; charset=utf-8 проставляет PlainTextResponse
    return PlainTextResponse(shuffler.shuffle(input))
