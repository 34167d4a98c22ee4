"""Pharmacy work-log and payroll package.

Organised by feature module (worklogs, payroll, profiles) with a thin Flask
controller layer over plain service/repository layers.
"""
