# Mendeleev-type heat-content coefficients, heat per percent of element
C_HEAT = 339.0    # carbon
H_HEAT = 1030.0   # hydrogen
O_HEAT = 108.0    # oxygen
S_HEAT = 25.0     # sulfur coefficient, applied to moisture

LHV_UNIT = "kJ/kg"

TOTAL_PERCENT = 100.0

# below this a basis denominator counts as zero
BASIS_EPS = 1e-12

COMPONENTS = ("hydrogen", "carbon", "sulfur", "nitrogen", "oxygen", "water", "ash")
