"""
Core validation: models, validators, rule pipeline and the HTML host layer.
"""
