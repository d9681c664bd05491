"""Attendance Portal package.

Loads the approved competition roster, serves it over a small Flask API and mirrors
every attendance change to a Google Sheets log.
"""
