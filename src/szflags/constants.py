"""Flag symbols as plain integer constants.

    from szflags.constants import SZ_ENTITY_DEFAULT_FLAGS, SZ_WITH_INFO

    flags = SZ_ENTITY_DEFAULT_FLAGS | SZ_WITH_INFO

Values mirror :data:`szflags.flag_data.FLAG_TABLE`; the test suite keeps the
two in step.
"""

SZ_WITH_INFO = 0x4000_0000_0000_0000
SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES = 0x0000_0000_0000_0001
SZ_EXPORT_INCLUDE_POSSIBLY_SAME = 0x0000_0000_0000_0002
SZ_EXPORT_INCLUDE_POSSIBLY_RELATED = 0x0000_0000_0000_0004
SZ_EXPORT_INCLUDE_NAME_ONLY = 0x0000_0000_0000_0008
SZ_EXPORT_INCLUDE_DISCLOSED = 0x0000_0000_0000_0010
SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES = 0x0000_0000_0000_0020
SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS = 0x0000_0000_0000_0040
SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS = 0x0000_0000_0000_0080
SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS = 0x0000_0000_0000_0100
SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS = 0x0000_0000_0000_0200
SZ_ENTITY_INCLUDE_ALL_FEATURES = 0x0000_0000_0000_0400
SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES = 0x0000_0000_0000_0800
SZ_ENTITY_INCLUDE_ENTITY_NAME = 0x0000_0000_0000_1000
SZ_ENTITY_INCLUDE_RECORD_SUMMARY = 0x0000_0000_0000_2000
SZ_ENTITY_INCLUDE_RECORD_TYPES = 0x0000_0000_1000_0000
SZ_ENTITY_INCLUDE_RECORD_DATA = 0x0000_0000_0000_4000
SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO = 0x0000_0000_0000_8000
SZ_ENTITY_INCLUDE_RECORD_DATES = 0x0000_0080_0000_0000
SZ_ENTITY_INCLUDE_RECORD_JSON_DATA = 0x0000_0000_0001_0000
SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA = 0x0000_0000_8000_0000
SZ_ENTITY_INCLUDE_RECORD_FEATURES = 0x0000_0000_0004_0000
SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS = 0x0000_0008_0000_0000
SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS = 0x0000_0010_0000_0000
SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME = 0x0000_0000_0008_0000
SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO = 0x0000_0000_0010_0000
SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY = 0x0000_0000_0020_0000
SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES = 0x0000_0000_2000_0000
SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA = 0x0000_0000_0040_0000
SZ_ENTITY_INCLUDE_INTERNAL_FEATURES = 0x0000_0000_0080_0000
SZ_ENTITY_INCLUDE_FEATURE_STATS = 0x0000_0000_0100_0000
SZ_INCLUDE_MATCH_KEY_DETAILS = 0x0000_0004_0000_0000
SZ_FIND_PATH_STRICT_AVOID = 0x0000_0000_0200_0000
SZ_FIND_PATH_INCLUDE_MATCHING_INFO = 0x0000_0000_4000_0000
SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO = 0x0000_0002_0000_0000
SZ_INCLUDE_FEATURE_SCORES = 0x0000_0000_0400_0000
SZ_SEARCH_INCLUDE_STATS = 0x0000_0000_0800_0000

# Search names for the export bits
SZ_SEARCH_INCLUDE_RESOLVED = 0x0000_0000_0000_0001
SZ_SEARCH_INCLUDE_POSSIBLY_SAME = 0x0000_0000_0000_0002
SZ_SEARCH_INCLUDE_POSSIBLY_RELATED = 0x0000_0000_0000_0004
SZ_SEARCH_INCLUDE_NAME_ONLY = 0x0000_0000_0000_0008
SZ_SEARCH_INCLUDE_ALL_CANDIDATES = 0x0000_0001_0000_0000
SZ_SEARCH_INCLUDE_REQUEST = 0x0000_0020_0000_0000
SZ_SEARCH_INCLUDE_REQUEST_DETAILS = 0x0000_0040_0000_0000

# Every flag usable with one usage group
SZ_NO_FLAGS = 0x0000_0000_0000_0000
SZ_MODIFY_ALL_FLAGS = 0x4000_0000_0000_0000
SZ_RECORD_ALL_FLAGS = 0x0000_0098_9085_8000
SZ_ENTITY_ALL_FLAGS = 0x0000_009C_B1FD_FFC0
SZ_FIND_PATH_ALL_FLAGS = 0x0000_009C_F3FD_FFC0
SZ_FIND_NETWORK_ALL_FLAGS = 0x0000_009E_B1FD_FFC0
SZ_SEARCH_ALL_FLAGS = 0x0000_00FD_BDFD_FFCF
SZ_EXPORT_ALL_FLAGS = 0x0000_009C_B1FD_FFFF
SZ_WHY_ALL_FLAGS = 0x0000_00FC_BDFD_FFC0
SZ_HOW_ALL_FLAGS = 0x0000_0004_0400_0000
SZ_VIRTUAL_ENTITY_ALL_FLAGS = 0x0000_0098_9185_FC00
SZ_RECORD_PREVIEW_ALL_FLAGS = 0x0000_0018_8085_0000
SZ_WHY_FLAGS = 0x0000_009C_B5FD_FFC0
SZ_HOW_FLAGS = 0x0000_0004_0400_0000

# Aggregates
SZ_EXPORT_INCLUDE_ALL_ENTITIES = 0x0000_0000_0000_0021
SZ_EXPORT_INCLUDE_ALL_HAVING_RELATIONSHIPS = 0x0000_0000_0000_001E
SZ_ENTITY_INCLUDE_ALL_RELATIONS = 0x0000_0000_0000_03C0
SZ_SEARCH_INCLUDE_ALL_ENTITIES = 0x0000_0000_0000_000F
SZ_RECORD_DEFAULT_FLAGS = 0x0000_0000_0001_0000
SZ_ENTITY_CORE_FLAGS = 0x0000_0000_0000_F800
SZ_ENTITY_DEFAULT_FLAGS = 0x0000_0000_0038_FBC0
SZ_ENTITY_BRIEF_DEFAULT_FLAGS = 0x0000_0000_0010_83C0
SZ_EXPORT_DEFAULT_FLAGS = 0x0000_0000_0038_FBE1
SZ_FIND_PATH_DEFAULT_FLAGS = 0x0000_0000_4000_3000
SZ_FIND_NETWORK_DEFAULT_FLAGS = 0x0000_0002_0000_3000
SZ_WHY_ENTITIES_DEFAULT_FLAGS = 0x0000_0000_05B8_FBC0
SZ_WHY_RECORDS_DEFAULT_FLAGS = 0x0000_0000_05B8_FBC0
SZ_WHY_RECORD_IN_ENTITY_DEFAULT_FLAGS = 0x0000_0000_05B8_FBC0
SZ_HOW_ENTITY_DEFAULT_FLAGS = 0x0000_0000_0400_0000
SZ_VIRTUAL_ENTITY_DEFAULT_FLAGS = 0x0000_0000_0000_F800
SZ_SEARCH_BY_ATTRIBUTES_ALL = 0x0000_0000_0400_380F
SZ_SEARCH_BY_ATTRIBUTES_STRONG = 0x0000_0000_0400_3803
SZ_SEARCH_BY_ATTRIBUTES_MINIMAL_ALL = 0x0000_0000_0000_000F
SZ_SEARCH_BY_ATTRIBUTES_MINIMAL_STRONG = 0x0000_0000_0000_0003
SZ_SEARCH_BY_ATTRIBUTES_DEFAULT_FLAGS = 0x0000_0000_0400_380F
