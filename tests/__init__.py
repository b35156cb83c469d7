"""
Test suite for the Stylit fit & color engine

Test modules:
- test_color_space.py: hex/RGB/Lab conversion and ΔE metrics
- test_color_logic.py: palette classification and garment color attributes
- test_color_naming.py: nearest named color and the FIFO cache
- test_measurements.py: unit, height and chart normalization
- test_fit_logic.py: ease profiles, size scoring, risk and confidence
- test_suitability.py: color verdicts and body-shape rules
- test_fabric_logic.py: stretch detection and comfort verdicts
- test_config.py: calibration presets, validation and environment settings
- test_engine.py: engine integration and determinism
- test_cli.py: command line output
"""
