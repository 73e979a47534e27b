"""Core modules for the Expense Tracker dashboard."""

from . import api, chat, config, dashboard, metrics, samples, session, utils, view_state, viz

__all__ = [
	"api",
	"chat",
	"config",
	"dashboard",
	"metrics",
	"samples",
	"session",
	"utils",
	"view_state",
	"viz",
]
