"""Auto-generated flag table from szflags.json.

Source: tests/data/szflags.json
Synced: 2026-10-19

Do not edit manually, re-run tools/sync_flag_data.py to update.
"""

from szflags.flags import AggregateFlag, AliasFlag, BitFlag, FlagTable
from szflags.groups import (
    ENTITY_HOW_SET,
    ENTITY_RECORD_SET,
    ENTITY_SET,
    EXPORT_SET,
    FIND_NETWORK_SET,
    FIND_PATH_SET,
    HOW_SET,
    HOW_WHY_SEARCH_SET,
    MODIFY_SET,
    RECORD_PREVIEW_SET,
    RECORD_SET,
    RELATION_SET,
    SEARCH_SET,
    UsageGroup,
    VIRTUAL_ENTITY_SET,
    WHY_SEARCH_SET,
    WHY_SET,
)

FLAG_TABLE: FlagTable = [
    BitFlag("SZ_WITH_INFO", 62, MODIFY_SET),
    BitFlag("SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES", 0, EXPORT_SET),
    BitFlag("SZ_EXPORT_INCLUDE_POSSIBLY_SAME", 1, EXPORT_SET),
    BitFlag("SZ_EXPORT_INCLUDE_POSSIBLY_RELATED", 2, EXPORT_SET),
    BitFlag("SZ_EXPORT_INCLUDE_NAME_ONLY", 3, EXPORT_SET),
    BitFlag("SZ_EXPORT_INCLUDE_DISCLOSED", 4, EXPORT_SET),
    BitFlag("SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES", 5, EXPORT_SET),
    BitFlag("SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS", 6, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS", 7, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS", 8, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS", 9, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_ALL_FEATURES", 10, ENTITY_SET),
    BitFlag("SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES", 11, ENTITY_SET),
    BitFlag("SZ_ENTITY_INCLUDE_ENTITY_NAME", 12, ENTITY_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_SUMMARY", 13, ENTITY_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_TYPES", 28, ENTITY_RECORD_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_DATA", 14, ENTITY_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO", 15, ENTITY_RECORD_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_DATES", 39, ENTITY_RECORD_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_JSON_DATA", 16, RECORD_PREVIEW_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA", 31, RECORD_PREVIEW_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_FEATURES", 18, RECORD_PREVIEW_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS", 35, RECORD_PREVIEW_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS", 36, RECORD_PREVIEW_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME", 19, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO", 20, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY", 21, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES", 29, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA", 22, RELATION_SET),
    BitFlag("SZ_ENTITY_INCLUDE_INTERNAL_FEATURES", 23, RECORD_PREVIEW_SET),
    BitFlag("SZ_ENTITY_INCLUDE_FEATURE_STATS", 24, ENTITY_SET),
    BitFlag("SZ_INCLUDE_MATCH_KEY_DETAILS", 34, ENTITY_HOW_SET),
    BitFlag("SZ_FIND_PATH_STRICT_AVOID", 25, FIND_PATH_SET),
    BitFlag("SZ_FIND_PATH_INCLUDE_MATCHING_INFO", 30, FIND_PATH_SET),
    BitFlag("SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO", 33, FIND_NETWORK_SET),
    BitFlag("SZ_INCLUDE_FEATURE_SCORES", 26, HOW_WHY_SEARCH_SET),
    BitFlag("SZ_SEARCH_INCLUDE_STATS", 27, WHY_SEARCH_SET),
    AliasFlag("SZ_SEARCH_INCLUDE_RESOLVED", "SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES", SEARCH_SET),
    AliasFlag("SZ_SEARCH_INCLUDE_POSSIBLY_SAME", "SZ_EXPORT_INCLUDE_POSSIBLY_SAME", SEARCH_SET),
    AliasFlag("SZ_SEARCH_INCLUDE_POSSIBLY_RELATED", "SZ_EXPORT_INCLUDE_POSSIBLY_RELATED", SEARCH_SET),
    AliasFlag("SZ_SEARCH_INCLUDE_NAME_ONLY", "SZ_EXPORT_INCLUDE_NAME_ONLY", SEARCH_SET),
    BitFlag("SZ_SEARCH_INCLUDE_ALL_CANDIDATES", 32, SEARCH_SET),
    BitFlag("SZ_SEARCH_INCLUDE_REQUEST", 37, WHY_SEARCH_SET),
    BitFlag("SZ_SEARCH_INCLUDE_REQUEST_DETAILS", 38, WHY_SEARCH_SET),
    AggregateFlag(
        "SZ_MODIFY_ALL_FLAGS",
        (
            "SZ_WITH_INFO",
        ),
        MODIFY_SET,
    ),
    AggregateFlag(
        "SZ_RECORD_ALL_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
        ),
        RECORD_SET,
    ),
    AggregateFlag(
        "SZ_ENTITY_ALL_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS",
            "SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS",
            "SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS",
            "SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS",
            "SZ_ENTITY_INCLUDE_ALL_FEATURES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
        ),
        UsageGroup.ENTITY,
    ),
    AggregateFlag(
        "SZ_FIND_PATH_ALL_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS",
            "SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS",
            "SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS",
            "SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS",
            "SZ_ENTITY_INCLUDE_ALL_FEATURES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
            "SZ_FIND_PATH_STRICT_AVOID",
            "SZ_FIND_PATH_INCLUDE_MATCHING_INFO",
        ),
        FIND_PATH_SET,
    ),
    AggregateFlag(
        "SZ_FIND_NETWORK_ALL_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS",
            "SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS",
            "SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS",
            "SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS",
            "SZ_ENTITY_INCLUDE_ALL_FEATURES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
            "SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO",
        ),
        FIND_NETWORK_SET,
    ),
    AggregateFlag(
        "SZ_SEARCH_ALL_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS",
            "SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS",
            "SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS",
            "SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS",
            "SZ_ENTITY_INCLUDE_ALL_FEATURES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
            "SZ_INCLUDE_FEATURE_SCORES",
            "SZ_SEARCH_INCLUDE_STATS",
            "SZ_SEARCH_INCLUDE_RESOLVED",
            "SZ_SEARCH_INCLUDE_POSSIBLY_SAME",
            "SZ_SEARCH_INCLUDE_POSSIBLY_RELATED",
            "SZ_SEARCH_INCLUDE_NAME_ONLY",
            "SZ_SEARCH_INCLUDE_ALL_CANDIDATES",
            "SZ_SEARCH_INCLUDE_REQUEST",
            "SZ_SEARCH_INCLUDE_REQUEST_DETAILS",
        ),
        SEARCH_SET,
    ),
    AggregateFlag(
        "SZ_EXPORT_ALL_FLAGS",
        (
            "SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES",
            "SZ_EXPORT_INCLUDE_POSSIBLY_SAME",
            "SZ_EXPORT_INCLUDE_POSSIBLY_RELATED",
            "SZ_EXPORT_INCLUDE_NAME_ONLY",
            "SZ_EXPORT_INCLUDE_DISCLOSED",
            "SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES",
            "SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS",
            "SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS",
            "SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS",
            "SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS",
            "SZ_ENTITY_INCLUDE_ALL_FEATURES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
        ),
        EXPORT_SET,
    ),
    AggregateFlag(
        "SZ_WHY_ALL_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS",
            "SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS",
            "SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS",
            "SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS",
            "SZ_ENTITY_INCLUDE_ALL_FEATURES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
            "SZ_INCLUDE_FEATURE_SCORES",
            "SZ_SEARCH_INCLUDE_STATS",
            "SZ_SEARCH_INCLUDE_REQUEST",
            "SZ_SEARCH_INCLUDE_REQUEST_DETAILS",
        ),
        WHY_SET,
    ),
    AggregateFlag(
        "SZ_HOW_ALL_FLAGS",
        (
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        HOW_SET,
    ),
    AggregateFlag(
        "SZ_VIRTUAL_ENTITY_ALL_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_ALL_FEATURES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
        ),
        VIRTUAL_ENTITY_SET,
    ),
    AggregateFlag(
        "SZ_RECORD_PREVIEW_ALL_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
        ),
        UsageGroup.RECORD_PREVIEW,
    ),
    AggregateFlag(
        "SZ_WHY_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS",
            "SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS",
            "SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS",
            "SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS",
            "SZ_ENTITY_INCLUDE_ALL_FEATURES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RECORD_DATES",
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURES",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS",
            "SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS",
            "SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        WHY_SET,
    ),
    AggregateFlag(
        "SZ_HOW_FLAGS",
        (
            "SZ_INCLUDE_MATCH_KEY_DETAILS",
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        HOW_SET,
    ),
    AggregateFlag(
        "SZ_EXPORT_INCLUDE_ALL_ENTITIES",
        (
            "SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES",
            "SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES",
        ),
        EXPORT_SET,
    ),
    AggregateFlag(
        "SZ_EXPORT_INCLUDE_ALL_HAVING_RELATIONSHIPS",
        (
            "SZ_EXPORT_INCLUDE_POSSIBLY_SAME",
            "SZ_EXPORT_INCLUDE_POSSIBLY_RELATED",
            "SZ_EXPORT_INCLUDE_NAME_ONLY",
            "SZ_EXPORT_INCLUDE_DISCLOSED",
        ),
        EXPORT_SET,
    ),
    AggregateFlag(
        "SZ_ENTITY_INCLUDE_ALL_RELATIONS",
        (
            "SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS",
            "SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS",
            "SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS",
            "SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS",
        ),
        RELATION_SET,
    ),
    AggregateFlag(
        "SZ_SEARCH_INCLUDE_ALL_ENTITIES",
        (
            "SZ_SEARCH_INCLUDE_RESOLVED",
            "SZ_SEARCH_INCLUDE_POSSIBLY_SAME",
            "SZ_SEARCH_INCLUDE_POSSIBLY_RELATED",
            "SZ_SEARCH_INCLUDE_NAME_ONLY",
        ),
        SEARCH_SET,
    ),
    AggregateFlag(
        "SZ_RECORD_DEFAULT_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_RECORD_JSON_DATA",
        ),
        RECORD_SET,
    ),
    AggregateFlag(
        "SZ_ENTITY_CORE_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RECORD_DATA",
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
        ),
        ENTITY_SET,
    ),
    AggregateFlag(
        "SZ_ENTITY_DEFAULT_FLAGS",
        (
            "SZ_ENTITY_CORE_FLAGS",
            "SZ_ENTITY_INCLUDE_ALL_RELATIONS",
            "SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
        ),
        RELATION_SET,
    ),
    AggregateFlag(
        "SZ_ENTITY_BRIEF_DEFAULT_FLAGS",
        (
            "SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_ALL_RELATIONS",
            "SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO",
        ),
        RELATION_SET,
    ),
    AggregateFlag(
        "SZ_EXPORT_DEFAULT_FLAGS",
        (
            "SZ_EXPORT_INCLUDE_ALL_ENTITIES",
            "SZ_ENTITY_DEFAULT_FLAGS",
        ),
        EXPORT_SET,
    ),
    AggregateFlag(
        "SZ_FIND_PATH_DEFAULT_FLAGS",
        (
            "SZ_FIND_PATH_INCLUDE_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
        ),
        FIND_PATH_SET,
    ),
    AggregateFlag(
        "SZ_FIND_NETWORK_DEFAULT_FLAGS",
        (
            "SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
        ),
        FIND_NETWORK_SET,
    ),
    AggregateFlag(
        "SZ_WHY_ENTITIES_DEFAULT_FLAGS",
        (
            "SZ_ENTITY_DEFAULT_FLAGS",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        WHY_SET,
    ),
    AggregateFlag(
        "SZ_WHY_RECORDS_DEFAULT_FLAGS",
        (
            "SZ_ENTITY_DEFAULT_FLAGS",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        WHY_SET,
    ),
    AggregateFlag(
        "SZ_WHY_RECORD_IN_ENTITY_DEFAULT_FLAGS",
        (
            "SZ_ENTITY_DEFAULT_FLAGS",
            "SZ_ENTITY_INCLUDE_INTERNAL_FEATURES",
            "SZ_ENTITY_INCLUDE_FEATURE_STATS",
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        WHY_SET,
    ),
    AggregateFlag(
        "SZ_HOW_ENTITY_DEFAULT_FLAGS",
        (
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        HOW_SET,
    ),
    AggregateFlag(
        "SZ_VIRTUAL_ENTITY_DEFAULT_FLAGS",
        (
            "SZ_ENTITY_CORE_FLAGS",
        ),
        VIRTUAL_ENTITY_SET,
    ),
    AggregateFlag(
        "SZ_SEARCH_BY_ATTRIBUTES_ALL",
        (
            "SZ_SEARCH_INCLUDE_ALL_ENTITIES",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        SEARCH_SET,
    ),
    AggregateFlag(
        "SZ_SEARCH_BY_ATTRIBUTES_STRONG",
        (
            "SZ_SEARCH_INCLUDE_RESOLVED",
            "SZ_SEARCH_INCLUDE_POSSIBLY_SAME",
            "SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES",
            "SZ_ENTITY_INCLUDE_ENTITY_NAME",
            "SZ_ENTITY_INCLUDE_RECORD_SUMMARY",
            "SZ_INCLUDE_FEATURE_SCORES",
        ),
        SEARCH_SET,
    ),
    AggregateFlag(
        "SZ_SEARCH_BY_ATTRIBUTES_MINIMAL_ALL",
        (
            "SZ_SEARCH_INCLUDE_ALL_ENTITIES",
        ),
        SEARCH_SET,
    ),
    AggregateFlag(
        "SZ_SEARCH_BY_ATTRIBUTES_MINIMAL_STRONG",
        (
            "SZ_SEARCH_INCLUDE_RESOLVED",
            "SZ_SEARCH_INCLUDE_POSSIBLY_SAME",
        ),
        SEARCH_SET,
    ),
    AggregateFlag(
        "SZ_SEARCH_BY_ATTRIBUTES_DEFAULT_FLAGS",
        (
            "SZ_SEARCH_BY_ATTRIBUTES_ALL",
        ),
        SEARCH_SET,
    ),
]
