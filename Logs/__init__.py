"""
Module d'initialisation du package Logs
"""

from .logger import RunLogger

__all__ = ['RunLogger']
