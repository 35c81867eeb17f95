"""Worked pipeline examples.

This package holds the sample data and named example pipelines
printed by the ``seqpipe walkthrough`` command.
"""
