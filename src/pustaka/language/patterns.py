"""Pattern library for heuristic language classification (id/ms/en/nl/jv).

Each language owns five pattern groups: academic vocabulary, institutional
vocabulary, geography, religious/cultural vocabulary and grammatical
particles/affixes.  Patterns anchored with ``\\b`` on both ends count as
whole-word patterns and weigh more than loose affix patterns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from pustaka.catalog.models import LanguageCode


ANCHORED_WEIGHT = 3
LOOSE_WEIGHT = 2

_SHARED_MALAY_GRAMMAR = (
    r"\b(?:yang|dan|di|ke|dari|untuk|pada|dengan|dalam|oleh|serta|antara|sebagai|atau|tidak|adalah|ini|itu)\b"
)
_MALAY_AFFIXES = (
    r"\bmeng?\w{3,}",
    r"\bber\w{3,}",
    r"\bter\w{4,}",
    r"\bdi\w{3,}kan\b",
    r"\bpe[mnr]?\w{3,}an\b",
    r"\bke\w{3,}an\b",
    r"\w{3,}nya\b",
)

LANGUAGE_PATTERNS: Mapping[LanguageCode, Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        LanguageCode.ID: MappingProxyType(
            {
                "academic": (
                    r"\b(?:sejarah|kajian|studi|penelitian|analisis|perkembangan|pengantar|tinjauan|laporan"
                    r"|himpunan|kumpulan|pedoman|teori|ilmu|pengetahuan|filsafat|kesusastraan|sastra"
                    r"|kebudayaan|budaya|pendidikan|ekonomi|politik|hukum|peraturan|pemerintahan)\b",
                ),
                "institutional": (
                    r"\b(?:universitas|departemen|kementerian|lembaga|penerbit|perpustakaan|balai|yayasan"
                    r"|institut|akademi|dinas|direktorat|republik|dewan)\b",
                ),
                "geography": (
                    r"\b(?:indonesia|nusantara|jakarta|bandung|surabaya|yogyakarta|semarang|medan|makassar"
                    r"|sumatera|sumatra|kalimantan|sulawesi|maluku|papua|bali|aceh|minangkabau|padang"
                    r"|betawi|sunda)\b",
                ),
                "cultural": (
                    r"\b(?:adat|tradisi|kesenian|upacara|pahlawan|kemerdekaan|perjuangan|revolusi|kolonial"
                    r"|penjajahan|kerajaan|rakyat)\b",
                ),
                "grammar": (
                    _SHARED_MALAY_GRAMMAR,
                    r"\b(?:tentang|terhadap|yaitu|saja|bisa|karena|setelah|sejak)\b",
                    *_MALAY_AFFIXES,
                ),
            }
        ),
        LanguageCode.MS: MappingProxyType(
            {
                "academic": (
                    r"\b(?:sejarah|kajian|pengajian|penyelidikan|ilmu|kebudayaan|budaya|ekonomi|politik"
                    r"|undang-undang|falsafah|pentadbiran|perlembagaan|tamadun|persuratan|kesusasteraan)\b",
                ),
                "institutional": (
                    r"\b(?:universiti|jabatan|pustaka|perbadanan|persatuan|majlis|kesatuan|kerajaan)\b",
                ),
                "geography": (
                    r"\b(?:malaysia|melayu|melaka|malaka|johor|kedah|kelantan|terengganu|pahang|perak|selangor"
                    r"|sabah|sarawak|brunei|singapura|pulau pinang|kuala lumpur|semenanjung)\b",
                ),
                "cultural": (
                    r"\b(?:adat|istiadat|tamadun|hikayat|syair|pantun|kesultanan|raja-raja|bangsa)\b",
                ),
                "grammar": (
                    _SHARED_MALAY_GRAMMAR,
                    r"\b(?:kepada|daripada|bagi|ialah|iaitu|sahaja|boleh|kerana|semasa|selepas)\b",
                    *_MALAY_AFFIXES,
                ),
            }
        ),
        LanguageCode.EN: MappingProxyType(
            {
                "academic": (
                    r"\b(?:history|historical|study|studies|research|analysis|development|introduction|culture"
                    r"|cultural|society|literature|language|religion|economy|economic|politics|political|law"
                    r"|education|science|survey|essays?|notes|report|handbook|guide|methods?|mathematics"
                    r"|philosophy|theory|thought)\b",
                ),
                "institutional": (
                    r"\b(?:university|press|institute|department|journal|museum|library|government|office"
                    r"|council|academy|foundation)\b",
                ),
                "geography": (
                    r"\b(?:indonesians?|java|javanese|sumatran?|malays?|malaysian|netherlands|dutch|east indies"
                    r"|southeast asian?|archipelago|borneo|celebes|moluccas)\b",
                ),
                "cultural": (
                    r"\b(?:islamic|muslim|christian|colonial|traditions?|arts?|music|kingdom|empire|war"
                    r"|revolution|independence)\b",
                ),
                "grammar": (
                    r"\b(?:the|of|and|in|on|for|with|an|to|from|by|its|their|between|during|under|into"
                    r"|towards?|through|is|are|was|were)\b",
                    r"\w{3,}tions?\b",
                    r"\w{3,}ness\b",
                    r"\w{2,}ology\b",
                    r"\w{3,}ments?\b",
                ),
            }
        ),
        LanguageCode.NL: MappingProxyType(
            {
                "academic": (
                    r"\b(?:geschiedenis|onderzoek|studie|beschrijving|verslag|verhandeling|bijdragen?|inleiding"
                    r"|handleiding|overzicht|aanteekeningen|proeve|woordenboek|spraakkunst|letterkunde|taal"
                    r"|volkenkunde|tijdschrift)\b",
                ),
                "institutional": (
                    r"\b(?:genootschap|regeering|regering|gouvernement|bestuur|residentie|departement|hoogeschool"
                    r"|universiteit|kunsten|wetenschappen|koninklijke?|instituut|uitgave)\b",
                ),
                "geography": (
                    r"\b(?:nederland|nederlandsch\w*|nederlandse?|indi[eë]|indische?|batavia|buitenbezittingen"
                    r"|archipel|holland|amsterdam|leiden|den haag)\b",
                ),
                "cultural": (
                    r"\b(?:koloniaal|koloniale|zending|kerk|inlandsche?|inboorlingen|volk|zeden|gewoonten"
                    r"|oorlog)\b",
                ),
                "grammar": (
                    r"\b(?:de|het|een|van|en|der|den|voor|met|tot|over|bij|naar|uit|op|aan|te|door|zijn|als"
                    r"|onder|tusschen|tussen)\b",
                    r"\w{3,}sch(?:e|en)?\b",
                    r"\w*ij[dkns]\w*",
                    r"\w{3,}heid\b",
                ),
            }
        ),
        LanguageCode.JV: MappingProxyType(
            {
                "academic": (
                    r"\b(?:serat|babad|suluk|primbon|kawruh)\b",
                ),
                "institutional": (
                    r"\b(?:kraton|keraton|kasunanan|kasultanan|mangkunegaran|pakualaman|kadipaten)\b",
                ),
                "geography": (
                    r"\b(?:jawa|jawi|ngayogyakarta|surakarta|mataram|kartasura|kedhaton)\b",
                ),
                "cultural": (
                    r"\b(?:tembang|wayang|gamelan|macapat|kawi|tayuban|ketoprak|kejawen|pangeran|raden|priyayi"
                    r"|sinuhun)\b",
                ),
                "grammar": (
                    r"\b(?:ingkang|punika|kang|ing|lan|saking|dhateng|kagungan|wonten|sampun|boten|mboten|ugi"
                    r"|nalika|menika|niki|iku|marang|karo)\b",
                    r"\b(?:centhini|pathet|pathokan|dhalang|dhukun|gendhing|gedhe|sedhela|kathah|wedhatama"
                    r"|pandhita|badhe|ngandhap|dhusun|dhuwur|mbathik|bathik|wedhar|sadhengah|tuladha)\b",
                    r"\w+ipun\b",
                    r"\bng\w{3,}",
                ),
            }
        ),
    }
)


@dataclass(frozen=True, slots=True)
class ContextBoost:
    """Fixed bonus granted to *languages* when *pattern* occurs in the text."""

    name: str
    pattern: str
    bonus: int
    languages: tuple[LanguageCode, ...]


CONTEXT_BOOSTS: tuple[ContextBoost, ...] = (
    ContextBoost(
        name="javanese-literary",
        pattern=r"\b(?:serat|babad|kraton|keraton|tembang|wayang|gamelan)\b",
        bonus=25,
        languages=(LanguageCode.JV,),
    ),
    ContextBoost(
        name="dutch-colonial",
        pattern=r"\b(?:indisch\w*|koloniaal|koloniale|nederlandsch\w*|voc|batavia\w*)\b",
        bonus=22,
        languages=(LanguageCode.NL,),
    ),
    # Shared religious vocabulary favours neither Indonesian nor Malay.
    ContextBoost(
        name="islamic",
        pattern=r"\b(?:islam|quran|qur'an|shalat|salat|solat|hadis|hadith|fiqh|fikih|tauhid|syariah|sunnah|masjid)\b",
        bonus=12,
        languages=(LanguageCode.ID, LanguageCode.MS),
    ),
    ContextBoost(name="universitas", pattern=r"\buniversitas\b", bonus=5, languages=(LanguageCode.ID,)),
    ContextBoost(name="universiti", pattern=r"\buniversiti\b", bonus=5, languages=(LanguageCode.MS,)),
    ContextBoost(name="university", pattern=r"\buniversity\b", bonus=5, languages=(LanguageCode.EN,)),
    ContextBoost(name="universiteit", pattern=r"\buniversiteit\b", bonus=5, languages=(LanguageCode.NL,)),
)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    group: str
    regex: re.Pattern[str]
    weight: int


def _is_anchored(source: str) -> bool:
    return source.startswith(r"\b") and source.endswith(r"\b")


@lru_cache(maxsize=1)
def compiled_patterns() -> Mapping[LanguageCode, tuple[CompiledPattern, ...]]:
    compiled: dict[LanguageCode, tuple[CompiledPattern, ...]] = {}
    for language, groups in LANGUAGE_PATTERNS.items():
        compiled[language] = tuple(
            CompiledPattern(
                group=group,
                regex=re.compile(source),
                weight=ANCHORED_WEIGHT if _is_anchored(source) else LOOSE_WEIGHT,
            )
            for group, sources in groups.items()
            for source in sources
        )
    return MappingProxyType(compiled)


@lru_cache(maxsize=1)
def compiled_boosts() -> tuple[tuple[ContextBoost, re.Pattern[str]], ...]:
    return tuple((boost, re.compile(boost.pattern)) for boost in CONTEXT_BOOSTS)
