"""
Shared configuration: data directory paths and network build options.
"""
