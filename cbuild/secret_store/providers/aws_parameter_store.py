"""
Secret store on AWS Systems Manager Parameter Store.
"""

__all__ = ["AWSParameterStore"]

import logging

from botocore.exceptions import BotoCoreError, ClientError

from cbuild.core import AWSProvider, NCall, Response
from cbuild.core.exceptions import SecretAccessError, SecretNotFoundError

from .._helper import decode_secret_value
from .._models import SourceCredential

logger = logging.getLogger(__name__)


class AWSParameterStore(AWSProvider):
    service_name = "ssm"

    def get(self, key: str) -> Response[str]:
        """Get a parameter value with decryption.

        Args:
            key: Parameter name.

        Returns:
            Raw parameter value.
        """
        self.__setup__()
        ex = self._client.exceptions
        nresult = NCall(
            self._client.get_parameter,
            {"Name": key, "WithDecryption": True},
            None,
            {
                ex.ParameterNotFound: SecretNotFoundError,
                ex.ParameterVersionNotFound: SecretNotFoundError,
                ClientError: SecretAccessError,
                BotoCoreError: SecretAccessError,
            },
        ).invoke()
        return Response(result=nresult["Parameter"]["Value"])

    def get_source_credential(
        self, key: str | None
    ) -> Response[SourceCredential | None]:
        """Get the credential for a private source repository.

        Args:
            key:
                Parameter holding the base64 encoded
                ``username:password`` credential. Nothing is
                fetched when empty.

        Returns:
            Source credential, or None without a key.
        """
        if not key:
            return Response(result=None)
        value = self.get(key).result
        logger.info("Got source repository credential from %s", key)
        result = SourceCredential(key=key, value=decode_secret_value(value))
        return Response(result=result)
