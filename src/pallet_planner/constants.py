BOX_HEIGHT = 14.0  # inches
PALLET_DECK_HEIGHT = 6.0  # inches
MAX_BOXES_PER_LAYER = 6  # 2 x 3 footprint

DEFAULT_UNITS_PER_BOX = 50
REFERENCE_BOX_WEIGHT = 14.5  # lbs at DEFAULT_UNITS_PER_BOX units
DEAD_WEIGHT = 35.0  # pallet + packaging, lbs

DEFAULT_MAX_PALLET_HEIGHT = 93.0
FOOTPRINT = (40, 48)  # inches, W x L

# Snake order; slot i of every layer sits on slot i of the layer below.
COORDINATES = ("a1", "a2", "a3", "b3", "b2", "b1")

MAX_CARTONS = 100_000

GROUPING_NONE = "none"
GROUPING_ITEM = "item"
GROUPING_PO_ITEM = "po-item"
GROUPINGS = (GROUPING_NONE, GROUPING_ITEM, GROUPING_PO_ITEM)
DEFAULT_GROUPING = GROUPING_PO_ITEM
MIXED_GROUP_KEY = "mixed"
