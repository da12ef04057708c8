"""Built-in ZIP code reference data used when no ZIP dataset file is configured."""

# Geographic center of the contiguous United States
NATIONAL_CENTROID = (39.8283, -98.5795)

# zip, lat, lng, city, state
METRO_ZIPS = [
    # East Coast
    ("10001", 40.7505, -73.9934, "New York", "NY"),
    ("02101", 42.3554, -71.0640, "Boston", "MA"),
    ("19102", 39.9526, -75.1652, "Philadelphia", "PA"),
    ("20001", 38.9072, -77.0369, "Washington", "DC"),
    ("33101", 25.7743, -80.1937, "Miami", "FL"),
    ("30301", 33.7678, -84.4906, "Atlanta", "GA"),
    ("28202", 35.2271, -80.8431, "Charlotte", "NC"),
    # Central
    ("60601", 41.8827, -87.6233, "Chicago", "IL"),
    ("77001", 29.7372, -95.3651, "Houston", "TX"),
    ("75201", 32.7767, -96.7970, "Dallas", "TX"),
    ("78701", 30.2672, -97.7431, "Austin", "TX"),
    ("32801", 28.5383, -81.3792, "Orlando", "FL"),
    ("37201", 36.1627, -86.7816, "Nashville", "TN"),
    ("63101", 38.6270, -90.1994, "St. Louis", "MO"),
    ("53202", 43.0389, -87.9065, "Milwaukee", "WI"),
    ("35203", 33.5186, -86.8104, "Birmingham", "AL"),
    # West Coast
    ("90210", 34.0901, -118.4065, "Los Angeles", "CA"),
    ("94102", 37.7849, -122.4194, "San Francisco", "CA"),
    ("98101", 47.6097, -122.3331, "Seattle", "WA"),
    ("97201", 45.5152, -122.6784, "Portland", "OR"),
    ("85001", 33.4484, -112.0740, "Phoenix", "AZ"),
    ("80202", 39.7392, -104.9903, "Denver", "CO"),
    ("89101", 36.1699, -115.1398, "Las Vegas", "NV"),
    ("84101", 40.7608, -111.8910, "Salt Lake City", "UT"),
]

# Used only for states with no rows in the loaded dataset
STATE_CENTERS = {
    "CA": (36.7783, -119.4179),
    "TX": (31.9686, -99.9018),
    "FL": (27.7663, -81.6868),
    "NY": (42.1657, -74.9481),
    "IL": (40.3363, -89.0022),
    "PA": (41.2033, -77.1945),
    "OH": (40.3888, -82.7649),
}

# (first 3-digit prefix, last 3-digit prefix, state). Checked in order, first match wins,
# so the DC range shadows the start of the MD range.
ZIP_PREFIX_STATES = [
    # Northeast
    (10, 27, "MA"), (28, 29, "RI"), (30, 38, "NH"), (39, 49, "ME"),
    (50, 59, "VT"), (60, 69, "CT"), (70, 89, "NJ"), (100, 149, "NY"),
    (150, 196, "PA"), (197, 199, "DE"), (200, 212, "DC"), (206, 219, "MD"),
    # Southeast
    (220, 246, "VA"), (247, 251, "WV"), (270, 289, "NC"), (290, 299, "SC"),
    (300, 319, "GA"), (320, 349, "FL"), (350, 369, "AL"), (370, 385, "TN"),
    (386, 397, "MS"), (398, 427, "KY"), (430, 458, "OH"), (459, 479, "IN"),
    # Midwest
    (480, 499, "MI"), (500, 528, "IA"), (530, 549, "WI"), (550, 567, "MN"),
    (570, 577, "SD"), (580, 588, "ND"), (590, 599, "MT"), (600, 629, "IL"),
    (630, 658, "MO"), (660, 679, "KS"), (680, 693, "NE"), (700, 729, "LA"),
    # South Central and West
    (730, 749, "AR"), (750, 799, "TX"), (800, 816, "CO"), (820, 831, "WY"),
    (832, 838, "ID"), (840, 847, "UT"), (850, 860, "AZ"), (870, 884, "NM"),
    (889, 899, "NV"), (900, 966, "CA"), (970, 979, "OR"), (980, 994, "WA"),
    (995, 999, "AK"), (967, 968, "HI"),
]
