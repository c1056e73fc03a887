# Database models (Post)
from . import db
from .media import MediaKind, media_url


class Post(db.Model):
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    author = db.Column(db.Text, nullable=False)
    date = db.Column(db.Text, nullable=False)  # YYYY-MM-DD, sorted as a string
    has_image = db.Column('hasimage', db.Boolean, nullable=False, default=False)
    has_avatar = db.Column('hasavatar', db.Boolean, nullable=False, default=False)
    content = db.Column(db.Text, nullable=False)
    visible = db.Column(db.Boolean, nullable=False, default=False)

    @property
    def avatar_path(self):
        return media_url(MediaKind.AVATAR, self.id) if self.has_avatar else ''

    @property
    def image_path(self):
        return media_url(MediaKind.IMAGE, self.id) if self.has_image else ''

    def to_dict(self):
        return {
            'id': self.id,
            'author': self.author,
            'date': self.date,
            'avatar_path': self.avatar_path,
            'image_path': self.image_path,
            'text': self.content,
        }

    def __repr__(self):
        return f'<Post {self.id} author={self.author} visible={self.visible}>'
