"""docsite/ -- Documentation pages, table of contents and navigation.

Layer rule: docsite/ may import from core/ (settings, release lookup).
core/ never imports from docsite/.
"""
