"""Domain layer for the SxS manifest generator.

This layer contains the manifest entities and the pure services that
inspect them. It is independent of XML and of any I/O.
"""
