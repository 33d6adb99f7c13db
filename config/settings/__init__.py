"""Settings package for the StayOS back office.

`base.py` holds the configuration shared across environments; `dev.py`,
`prod.py` and `test.py` extend it with environment specific overrides.
"""
