from __future__ import annotations

import logging

import pycantonese

from .errors import NotFoundError
from .models import JyutpingResult

logger = logging.getLogger(__name__)


def get_jyutping(word: str) -> JyutpingResult:
    """
    Look up the Cantonese reading of word.

    pycantonese segments the word itself and returns (chars, jyutping) pairs;
    jyutping is None for segments it has no reading for. A word where no
    segment has a reading counts as not found.
    """
    segments = [(chars, jp) for chars, jp in pycantonese.characters_to_jyutping(word)]
    if not any(jp for _, jp in segments):
        logger.debug("No jyutping for %s", word)
        raise NotFoundError(word)
    return JyutpingResult(word=word, segments=segments)
