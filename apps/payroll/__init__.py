"""Payroll payments to cooks."""
