import sys
import os

# Add your project directory to the sys.path
project_home = '/home/YOUR_USERNAME/catering-prep'
if project_home not in sys.path:
    sys.path.insert(0, project_home)

os.environ.setdefault('FLASK_ENV', 'production')

# Import the prep engine API
from app import app as application
