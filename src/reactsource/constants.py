"""Physical constants shared by the rate laws and thermo models."""

R_GAS = 8.314462618  # J/(mol·K)
P_STANDARD = 1.0e5  # Pa
T_REFERENCE = 298.15  # K
