"""Tests for Window Bridge"""
