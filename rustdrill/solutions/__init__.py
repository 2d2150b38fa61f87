"""Worked answers to the exercises, written as plain Python."""