import math

# Emission factors in g CO2 per km (ADEME averages)
EMISSION_FACTORS = {
    'car': 193,
    'bus': 113,    # diesel bus
    'train': 8.9,  # high-speed rail
    'plane': 285,
}

ZERO_EMISSION_KEYWORDS = ('walk', 'foot', 'bike', 'bicycle')


def calculate_co2_emissions(distance_m, mode):
    """CO2 in grams for `distance_m` metres travelled with `mode`.

    Any mode mentioning walking or cycling emits nothing; unknown modes
    are billed as a car.
    """
    m = (mode or '').lower()
    if any(keyword in m for keyword in ZERO_EMISSION_KEYWORDS):
        return 0

    factor = EMISSION_FACTORS.get(m, EMISSION_FACTORS['car'])
    # half-up, not banker's rounding
    return int(math.floor(distance_m / 1000 * factor + 0.5))
