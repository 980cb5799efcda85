"""Event records, vector types, particle and neutron-wall kinematics, and bootstrap statistics."""

__version__ = "0.1.0"