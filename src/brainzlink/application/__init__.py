"""Application layer: query builders."""
