"""
Web Module - Black Box Interface

Purpose: HTML presentation of the configured commands
Interface: IndexPage.render()
Hidden: Template engine, markup, client-side script
"""

from .page import IndexPage, build_template_environment

__all__ = ["IndexPage", "build_template_environment"]
