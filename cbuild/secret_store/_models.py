from pydantic import SecretStr

from cbuild.core import DataModel


class SourceCredential(DataModel):
    """Source repository credential.

    Attributes:
        key: Secret store key the credential was read from.
        value: Decoded ``username:password`` text.
    """

    key: str
    value: SecretStr
