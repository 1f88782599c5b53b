"""mytube package.

Personal video-bookmarking service organized by feature modules (accounts,
collection, ...) with a thin Flask controller layer on top of use-case
services and Protocol repositories.
"""
