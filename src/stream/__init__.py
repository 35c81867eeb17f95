"""Lazy sequence pipelines.

This package queues filter/map style stages as data and evaluates
them in one pass when a terminal operation is invoked.
"""
