from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class ShortURLModel:
    target: str                 # Original long URL, stored verbatim
    shortcode: str              # Short identifier of the shortened URL
    hits: int | None = None     # Resolve count after the latest hit, when known
    deduplicated: bool = False  # True if an already issued shortcode was returned
# fmt: on
