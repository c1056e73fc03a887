from blog import create_app
from blog.store import count_invisible

# Create an app instance (this also creates the posts table if absent)
app = create_app()

# The 'app_context' is needed for SQLAlchemy to know which app it's working with
with app.app_context():
    print("Posts table ready.")
    hidden = count_invisible()
    if hidden:
        print(f"{hidden} hidden post(s) left by failed submissions.")
    print("Done!")
