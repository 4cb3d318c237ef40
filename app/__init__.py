"""Aerodex backend: aircraft encyclopedia API and flight tracker."""
