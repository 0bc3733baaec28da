# =============================================================================
# SVM - Signal Verification Module
# =============================================================================
#
#   raw_decoder.py - raw stream → sample words, frequency / level estimates
#   validate.py    - self-validation suite (python -m SSCE.SVM.validate)
# =============================================================================
