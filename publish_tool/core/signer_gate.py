"""All-or-nothing signing of a publication"""

import logging
from typing import Dict

from ..api.exceptions import SigningFailedError
from ..models import Publication, SignatureSet
from ..signing import Signer

logger = logging.getLogger(__name__)


def sign(publication: Publication, signer: Signer) -> SignatureSet:
    """
    Sign every artifact of a publication

    Stops at the first failure; a partial signature set is never returned.

    Args:
        publication: Publication to sign
        signer: Signing capability

    Returns:
        SignatureSet covering every classifier of the publication

    Raises:
        SigningFailedError: Carrying the classifier of the first failing artifact
    """
    signatures: Dict[str, bytes] = {}

    for artifact in publication.artifacts:
        try:
            signature = signer.sign(artifact.content)
        except SigningFailedError as e:
            raise SigningFailedError(artifact.classifier, e.reason or str(e)) from e
        except Exception as e:
            raise SigningFailedError(artifact.classifier, str(e)) from e

        if not signature:
            raise SigningFailedError(artifact.classifier, "signer returned an empty signature")

        signatures[artifact.classifier] = signature
        logger.debug("Signed artifact %s", artifact.classifier or "<primary>")

    signature_set = SignatureSet(signatures)
    if not signature_set.covers(publication):
        raise SigningFailedError(reason="signature set does not cover every artifact")
    return signature_set
