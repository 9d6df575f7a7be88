"""MentorConnect companion service."""
