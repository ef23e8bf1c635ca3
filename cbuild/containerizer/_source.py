from __future__ import annotations

from cbuild.core import DataModel
from cbuild.core.exceptions import InvalidSourceReferenceError

DEFAULT_SCHEME = "https"
SUPPORTED_SCHEMES = ("https", "http", "git")
VCS_SUFFIX = ".git"


class SourceReference(DataModel):
    """Version-control locator of a remote build context.

    A reference looks like ``github.com/org/repo.git#branch:subdir``.
    The fragment selects a branch and, after ``:``, a sub-directory.

    Attributes:
        scheme: URL scheme used to fetch the repository.
        location: Host and path of the repository.
        fragment: Branch and sub-directory selector.
    """

    scheme: str = DEFAULT_SCHEME
    location: str
    fragment: str | None = None

    @classmethod
    def parse(cls, source: str) -> SourceReference:
        scheme = DEFAULT_SCHEME
        rest = source.strip()
        if "://" in rest:
            scheme, rest = rest.split("://", 1)
            if scheme not in SUPPORTED_SCHEMES:
                raise InvalidSourceReferenceError(
                    f"Unsupported scheme {scheme!r} in {source!r}"
                )
        location, _, fragment = rest.partition("#")
        if not location.endswith(VCS_SUFFIX) or "/" not in location:
            raise InvalidSourceReferenceError(
                f"Invalid repository name {source!r} "
                f"(expected host/path ending with {VCS_SUFFIX})"
            )
        return cls(scheme=scheme, location=location, fragment=fragment or None)

    def image_name(self) -> str:
        """Derive the image name.

        The sub-directory when the fragment selects one, else the
        branch, else the repository name.
        """
        if self.fragment is not None:
            if ":" in self.fragment:
                name = self.fragment.split(":", 1)[1]
            else:
                name = self.fragment
        else:
            name = self.location.removesuffix(VCS_SUFFIX).split("/")[-1]
        if not name:
            raise InvalidSourceReferenceError(
                f"Cannot derive an image name from {self.location!r}"
            )
        return name

    def url(self, credential: str | None = None) -> str:
        url = f"{self.scheme}://"
        if credential:
            url += f"{credential}@"
        url += self.location
        if self.fragment is not None:
            url += f"#{self.fragment}"
        return url

    def __str__(self) -> str:
        return self.url()
