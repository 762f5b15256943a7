"""Courses GraphQL service"""
