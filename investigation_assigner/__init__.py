'''
Automatically assigns investigations of failed builds to a responsible user
'''
