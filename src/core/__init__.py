"""Core calculator package.

Core holds parsing, validation, and arithmetic without any console or
config-file code, keeping the engine a pure function of settings and input.
"""
