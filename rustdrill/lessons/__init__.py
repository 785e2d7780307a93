"""Worked solutions to the exercise topics, one module per topic."""