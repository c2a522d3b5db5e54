import logging

import config
import prompts
from errors import InvalidInputError, upstream_error
from gemini_client import GeminiClient
from schemas import FactCheckRequest

logger = logging.getLogger(__name__)


async def check_fact(gemini: GeminiClient, request: FactCheckRequest) -> dict:
    """
    validate -> build prompt -> call Gemini -> return its JSON unchanged.
    Upstream failures are re-raised as a classified UpstreamError.
    """
    try:
        kind, value = prompts.select_input(url=request.url, title=request.title)
    except ValueError:
        raise InvalidInputError() from None

    logger.info("Processing request with %s: %s", kind, value)
    prompt = prompts.render_prompt(kind, value)

    try:
        return await gemini.generate_json(prompt, prompts.VERDICT_RESPONSE_SCHEMA)
    except Exception as e:
        error = upstream_error(e, expose_details=config.is_development())
        logger.error("Gemini call failed (%s): %s", error.kind.value, e)
        raise error from e
