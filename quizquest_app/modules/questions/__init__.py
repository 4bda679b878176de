"""Questions module: study-item selection and tier-based visibility."""
