"""Rule-based description drafts selected from record characteristics.

Template *family* selection is deterministic.  The variant inside a family
is drawn from an injectable ``random.Random`` so callers can pin the
wording with a seed.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from pustaka.catalog.models import CatalogRecord, Characteristics, LanguageCode
from pustaka.timeline.years import era_label


DESCRIPTION_SOURCE = "rule-based"


class TemplateFamily(str, Enum):
    ANCIENT_MANUSCRIPT = "ancient-manuscript"
    DUTCH_COLONIAL = "dutch-colonial"
    COLONIAL_ERA = "colonial-era"
    MODERN_ERA = "modern-era"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class DescriptionDraft:
    description: str
    confidence: float
    template: TemplateFamily
    variant: int
    source: str = DESCRIPTION_SOURCE

    def to_dict(self) -> dict[str, object]:
        return {
            "description": self.description,
            "confidence": self.confidence,
            "template": self.template.value,
            "variant": self.variant,
            "source": self.source,
        }


_VARIANTS: dict[TemplateFamily, tuple[str, ...]] = {
    TemplateFamily.ANCIENT_MANUSCRIPT: (
        "Naskah kuno abad ke-{century} mengenai {topics}, bagian dari khazanah manuskrip Nusantara.",
        "Manuskrip langka masa {era} tentang {topics}, penting bagi kajian filologi.",
        "Naskah tradisional yang menguraikan {topics}; ditulis pada masa {era}.",
    ),
    TemplateFamily.DUTCH_COLONIAL: (
        "Terbitan berbahasa Belanda{author_part} tentang {topics}, terbit {year}{publisher_part}.",
        "Kajian era Hindia Belanda mengenai {topics}{publisher_part}, ditulis dalam bahasa Belanda.",
        "Dokumentasi masa kolonial tentang {topics}{author_part}{publisher_part}.",
    ),
    TemplateFamily.COLONIAL_ERA: (
        "Buku masa kolonial tentang {topics}{author_part}, terbit {year}{publisher_part}.",
        "Terbitan periode {era} yang membahas {topics}{publisher_part}.",
        "Bacaan tentang {topics} dari masa sebelum kemerdekaan{author_part}{publisher_part}.",
    ),
    TemplateFamily.MODERN_ERA: (
        "Buku masa {era} tentang {topics}{author_part}, terbit {year}{publisher_part}.",
        "Kajian Indonesia modern mengenai {topics}{publisher_part}.",
        "Karya masa {era} yang membahas {topics}{author_part}{publisher_part}.",
    ),
    TemplateFamily.DEFAULT: (
        "Buku tentang {topics}.{author_sentence}{year_sentence}{publisher_sentence}",
    ),
}


def template_family(characteristics: Characteristics) -> TemplateFamily:
    if characteristics.is_ancient:
        return TemplateFamily.ANCIENT_MANUSCRIPT
    if characteristics.language is LanguageCode.NL:
        return TemplateFamily.DUTCH_COLONIAL
    if characteristics.is_colonial:
        return TemplateFamily.COLONIAL_ERA
    if characteristics.is_post_independence:
        return TemplateFamily.MODERN_ERA
    return TemplateFamily.DEFAULT


def _fields(record: CatalogRecord, characteristics: Characteristics) -> dict[str, str]:
    author = record.author if characteristics.has_author else None
    publisher = record.publisher if characteristics.has_publisher else None
    year = str(characteristics.year) if characteristics.year is not None else "tahun tidak diketahui"
    century = str(characteristics.year // 100 + 1) if characteristics.year is not None else "?"
    return {
        "topics": " dan ".join(characteristics.topics),
        "era": era_label(characteristics.era),
        "year": year,
        "century": century,
        "author_part": f" karya {author}" if author else "",
        "publisher_part": f", terbitan {publisher}" if publisher else "",
        "author_sentence": f" Karya {author}." if author else "",
        "year_sentence": f" Terbit tahun {characteristics.year}." if characteristics.year is not None else "",
        "publisher_sentence": f" Diterbitkan oleh {publisher}." if publisher else "",
    }


def select_description(
    record: CatalogRecord,
    characteristics: Characteristics,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> DescriptionDraft:
    """Draft a description for *record*; *rng* wins over *seed* when both are given."""

    family = template_family(characteristics)
    variants = _VARIANTS[family]
    chooser = rng if rng is not None else random.Random(seed)
    variant = chooser.randrange(len(variants))

    text = variants[variant].format(**_fields(record, characteristics))
    return DescriptionDraft(
        description=" ".join(text.split()),
        confidence=characteristics.confidence,
        template=family,
        variant=variant,
    )
