"""Moteur de règles des dames anglaises."""
