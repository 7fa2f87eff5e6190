import pint

UNITS = pint.UnitRegistry()
Quantity = UNITS.Quantity

unit_definitions = [
    'fraction = 1 = frac',
    'pct = 1e-2 fraction'
]
for ud in unit_definitions:
    # newer pint releases may already know some of these names
    if ud.split('=')[0].strip() not in UNITS:
        UNITS.define(ud)

pint.set_application_registry(UNITS)
