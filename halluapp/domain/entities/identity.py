"""Domain entity for an identity asserted by the external provider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExternalIdentity:
    """Claims taken from a verified identity token (or a trusted client)."""

    uid: str
    email: str | None
    name: str | None = None

    def display_name(self) -> str:
        """Return the asserted name, falling back to the email's local part."""

        if self.name:
            return self.name
        if self.email:
            return self.email.split("@", 1)[0]
        return self.uid


__all__ = ["ExternalIdentity"]
