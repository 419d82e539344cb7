"""Post service layer."""

import logging
from datetime import UTC, datetime

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from newstime.db.models import Author, Category, Post, YouTubeVideo
from newstime.posts.schemas import (
    PostCreate,
    PostResponse,
    PostSearchParams,
    PostUpdate,
    StatsOverview,
)
from newstime.slugs import slugify, unique_slug

logger = logging.getLogger(__name__)

TRENDING_LIMIT = 5


class PostService:
    """Service class for post operations."""

    def __init__(self, db: Session):
        """Initialize post service.

        Args:
            db: Database session.
        """
        self.db = db

    def _base_query(self):
        return self.db.query(Post).options(
            joinedload(Post.category),
            joinedload(Post.author),
        )

    def to_response(self, post: Post, include_author_bio: bool = False) -> PostResponse:
        """Flatten a post with its category and author.

        Args:
            post: Post model.
            include_author_bio: Whether to include the author's bio.

        Returns:
            PostResponse: Response schema.
        """
        category = post.category
        author = post.author
        return PostResponse(
            id=post.id,
            title=post.title,
            slug=post.slug,
            excerpt=post.excerpt,
            content=post.content,
            featured_image=post.featured_image,
            category_id=post.category_id,
            category_name=category.name if category else None,
            category_slug=category.slug if category else None,
            category_color=category.color if category else None,
            author_id=post.author_id,
            author_name=author.name if author else None,
            author_avatar=author.avatar if author else None,
            author_bio=author.bio if author and include_author_bio else None,
            tags=post.tags or [],
            keywords=post.keywords or [],
            youtube_id=post.youtube_id,
            is_featured=post.is_featured,
            is_published=post.is_published,
            views=post.views or 0,
            publish_date=post.publish_date,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def list_posts(self, params: PostSearchParams) -> list[Post]:
        """List published posts, newest first.

        Args:
            params: Category slug, featured flag, search text and paging.

        Returns:
            list[Post]: Matching posts.
        """
        query = self._base_query().filter(Post.is_published.is_(True))

        if params.category:
            query = query.join(Category, Post.category_id == Category.id).filter(
                Category.slug == params.category
            )

        if params.featured:
            query = query.filter(Post.is_featured.is_(True))

        if params.search:
            term = f"%{params.search}%"
            query = query.filter(
                or_(
                    Post.title.ilike(term),
                    Post.excerpt.ilike(term),
                    Post.content.ilike(term),
                )
            )

        return (
            query.order_by(Post.publish_date.desc(), Post.id.desc())
            .offset(params.offset)
            .limit(params.limit)
            .all()
        )

    def trending(self, limit: int = TRENDING_LIMIT) -> list[Post]:
        """Get the most viewed published posts.

        Args:
            limit: Number of posts.

        Returns:
            list[Post]: Posts ordered by views.
        """
        return (
            self._base_query()
            .filter(Post.is_published.is_(True))
            .order_by(Post.views.desc(), Post.id.desc())
            .limit(limit)
            .all()
        )

    def get_by_slug(self, slug: str) -> Post | None:
        """Get a post by slug.

        Args:
            slug: Post slug.

        Returns:
            Post | None: The post if found.
        """
        return self._base_query().filter(Post.slug == slug).first()

    def get(self, post_id: int) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID.

        Returns:
            Post | None: The post if found.
        """
        return self.db.query(Post).filter(Post.id == post_id).first()

    def record_view(self, post: Post) -> Post:
        """Increment a post's view counter.

        Args:
            post: Post being read.

        Returns:
            Post: Refreshed post.
        """
        self.db.query(Post).filter(Post.id == post.id).update(
            {Post.views: Post.views + 1},
            synchronize_session=False,
        )
        self.db.commit()
        self.db.refresh(post)
        return post

    def _check_references(self, category_id: int | None, author_id: int | None) -> None:
        if category_id is not None and not self.db.get(Category, category_id):
            raise ValueError(f"Category {category_id} not found")
        if author_id is not None and not self.db.get(Author, author_id):
            raise ValueError(f"Author {author_id} not found")

    def _check_slug(self, slug: str, exclude_id: int | None = None) -> None:
        query = self.db.query(Post).filter(Post.slug == slug)
        if exclude_id is not None:
            query = query.filter(Post.id != exclude_id)
        if query.first():
            raise ValueError(f"Post slug '{slug}' already exists")

    def _adjust_post_count(self, category_id: int | None, delta: int) -> None:
        if category_id is None:
            return
        category = self.db.get(Category, category_id)
        if category is not None:
            category.post_count = max(0, (category.post_count or 0) + delta)

    def create(self, data: PostCreate) -> Post:
        """Create a post.

        Args:
            data: Post creation data.

        Returns:
            Post: Created post.

        Raises:
            ValueError: If the slug is taken or a referenced row is missing.
        """
        self._check_references(data.category_id, data.author_id)

        # A slug with no usable characters falls back to one derived from the title
        slug = slugify(data.slug) if data.slug else ""
        if slug:
            self._check_slug(slug)
        else:
            slug = unique_slug(self.db, Post, data.title)

        post = Post(
            title=data.title,
            slug=slug,
            excerpt=data.excerpt,
            content=data.content,
            featured_image=data.featured_image,
            category_id=data.category_id,
            author_id=data.author_id,
            tags=list(data.tags),
            keywords=list(data.keywords),
            youtube_id=data.youtube_id or None,
            is_featured=data.is_featured,
            is_published=data.is_published,
            publish_date=data.publish_date or datetime.now(UTC),
        )
        self.db.add(post)
        self._adjust_post_count(data.category_id, +1)
        self.db.commit()
        self.db.refresh(post)

        logger.info(f"Created post {post.id} ({post.slug})")
        return post

    def update(self, post_id: int, data: PostUpdate) -> Post | None:
        """Update a post with the supplied fields.

        Args:
            post_id: Post ID.
            data: Fields to change.

        Returns:
            Post | None: Updated post, or None if not found.

        Raises:
            ValueError: If the slug is taken or a referenced row is missing.
        """
        post = self.get(post_id)
        if not post:
            return None

        updates = data.model_dump(exclude_unset=True)
        # Columns that cannot be null ignore an explicit null
        for field in ("title", "slug", "tags", "keywords", "is_featured", "is_published"):
            if field in updates and updates[field] is None:
                del updates[field]

        self._check_references(updates.get("category_id"), updates.get("author_id"))

        if "slug" in updates:
            slug = slugify(updates["slug"])
            if slug:
                self._check_slug(slug, exclude_id=post.id)
            else:
                title = updates.get("title") or post.title
                slug = unique_slug(self.db, Post, title, exclude_id=post.id)
            updates["slug"] = slug

        if "category_id" in updates and updates["category_id"] != post.category_id:
            self._adjust_post_count(post.category_id, -1)
            self._adjust_post_count(updates["category_id"], +1)

        for field, value in updates.items():
            setattr(post, field, value)

        self.db.commit()
        self.db.refresh(post)
        return post

    def delete(self, post_id: int) -> bool:
        """Delete a post.

        Args:
            post_id: Post ID.

        Returns:
            bool: True if the post existed.
        """
        post = self.get(post_id)
        if not post:
            return False

        self._adjust_post_count(post.category_id, -1)
        self.db.delete(post)
        self.db.commit()

        logger.info(f"Deleted post {post_id}")
        return True

    def get_stats(self) -> StatsOverview:
        """Get dashboard counters.

        Returns:
            StatsOverview: Post, view, category and video totals.
        """
        total_views = self.db.query(func.coalesce(func.sum(Post.views), 0)).scalar()
        return StatsOverview(
            totalPosts=self.db.query(Post).count(),
            totalViews=int(total_views or 0),
            totalCategories=self.db.query(Category).count(),
            totalVideos=self.db.query(YouTubeVideo).count(),
        )


def get_post_service(db: Session) -> PostService:
    """Factory function for PostService.

    Args:
        db: Database session.

    Returns:
        PostService: Post service instance.
    """
    return PostService(db)
