from dataclasses import dataclass


@dataclass
class Profile:
    """The site's single profile document."""

    contents: str
