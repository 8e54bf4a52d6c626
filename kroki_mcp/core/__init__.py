"""Core configuration, errors and logging"""
