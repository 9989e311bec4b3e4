"""Physical constants and numerical settings."""

R_GAS = 8.314462618  # J/mol/K
T_REF = 298.15  # K, reference temperature for species data
P_REF = 101325.0  # Pa, reference pressure

# Composition changes at or below this are treated as "unchanged" by the
# reference-state cache.
COMPOSITION_TOLERANCE = 1e-12

# Floor for mole fractions inside logarithms.
SMALL_NUMBER = 1e-300
