"""Tiling window manager model: clients, monitors, rules, layouts and configuration."""