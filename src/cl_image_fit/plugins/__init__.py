"""Compute plugins shipped with cl_image_fit."""
